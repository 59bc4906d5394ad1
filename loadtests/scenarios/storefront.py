"""Storefront load test scenarios.

Two journeys: a shopper who buys a product and reviews it (exercising
purchase verification and rating recomputation), and a visitor browsing
the catalogue and comment lists.
"""

import os
import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import fake, order_data, product_data, review_data
from loadtests.helpers.state import BrowserState, ShopperState

ADMIN_HEADERS = {"X-Admin-Secret": os.environ.get("STOREFRONT_ADMIN_SECRET", "")}


class VerifiedReviewJourney(SequentialTaskSet):
    """Create Product -> Place Order -> Review (verified) -> Review (anonymous) -> Read Comments."""

    def on_start(self):
        self.state = ShopperState(firstname=fake.first_name(), lastname=fake.last_name())
        self.product = product_data()

    @task
    def create_product(self):
        with self.client.post(
            "/api/products",
            json=self.product,
            headers=ADMIN_HEADERS,
            catch_response=True,
            name="POST /api/products",
        ) as resp:
            if resp.status_code == 201:
                self.state.product_id = resp.json()["id"]
                self.state.legacy_id = resp.json()["legacyId"]
            else:
                resp.failure(f"Create product failed: {resp.status_code}")
                self.interrupt()

    @task
    def place_order(self):
        payload = order_data(
            self.state.legacy_id,
            self.product["name"],
            self.product["price"],
            self.state.firstname,
            self.state.lastname,
        )
        with self.client.post("/api/orders", json=payload, catch_response=True, name="POST /api/orders") as resp:
            if resp.status_code == 201:
                self.state.order_id = resp.json()["orderId"]
            else:
                resp.failure(f"Place order failed: {resp.status_code}")

    @task
    def review_as_buyer(self):
        with self.client.post(
            f"/api/products/{self.state.legacy_id}/reviews",
            json=review_data(self.state.firstname),
            catch_response=True,
            name="POST /api/products/{id}/reviews",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Review failed: {resp.status_code}")
            elif self.state.order_id and not resp.json()["newComment"]["verifiedPurchase"]:
                resp.failure("Buyer review was not marked as a verified purchase")
            else:
                self.state.review_count += 1

    @task
    def review_as_stranger(self):
        with self.client.post(
            f"/api/products/{self.state.legacy_id}/reviews",
            json=review_data(fake.name()),
            catch_response=True,
            name="POST /api/products/{id}/reviews",
        ) as resp:
            if resp.status_code == 201:
                self.state.review_count += 1
                if resp.json()["newReviewsCount"] < self.state.review_count:
                    resp.failure("Reviews count went backwards")
            else:
                resp.failure(f"Review failed: {resp.status_code}")

    @task
    def read_comments(self):
        self.client.get(
            f"/api/comments/{self.state.product_id}",
            params={"sort": random.choice(["newest", "highest", "lowest"])},
            name="GET /api/comments/{id}",
        )

    @task
    def done(self):
        self.interrupt()


class BrowseCatalogue(SequentialTaskSet):
    """List Products -> Open Product Page -> Filter Comments."""

    def on_start(self):
        self.state = BrowserState()

    @task
    def list_products(self):
        with self.client.get("/api/products", catch_response=True, name="GET /api/products") as resp:
            if resp.status_code == 200:
                self.state.product_ids = [entry["productId"] for entry in resp.json()]
            else:
                resp.failure(f"List products failed: {resp.status_code}")
                self.interrupt()

    @task
    def open_product_page(self):
        if not self.state.product_ids:
            self.interrupt()
        self.client.get(f"/product/{random.choice(self.state.product_ids)}", name="GET /product/{id}")

    @task
    def filter_comments(self):
        if not self.state.product_ids:
            self.interrupt()
        self.client.get(
            f"/api/comments/{random.choice(self.state.product_ids)}",
            params={"stars": "5,4"},
            name="GET /api/comments/{id}?stars",
        )

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    """Locust user buying and reviewing products."""

    wait_time = between(0.5, 2.0)
    tasks = [VerifiedReviewJourney]


class BrowserUser(HttpUser):
    """Locust user reading the catalogue. Weighted to outnumber shoppers."""

    weight = 3
    wait_time = between(0.5, 2.0)
    tasks = [BrowseCatalogue]
