"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the storefront's validation
rules and use the camelCase field names the API accepts.
"""

import random
import uuid

from faker import Faker

fake = Faker()


def product_data() -> dict:
    """Admin product payload; names stay within 3-150 characters."""
    word = fake.word().capitalize()
    price = round(random.uniform(50.0, 2000.0), 2)
    return {
        "name": f"{word} {fake.word()} {uuid.uuid4().hex[:6]}",
        "price": price,
        "originalPrice": round(price * random.uniform(1.0, 1.4), 2),
        "category": [fake.word()],
        "images": [f"/uploads/{uuid.uuid4().hex[:12]}.jpg"],
        "description": fake.sentence(nb_words=12)[:2000],
        "sellerTag": random.choice(["Bestseller", "New", "Limited"]),
        "deliveryDate": f"Delivery in {random.randint(2, 7)} days",
    }


def customer_data(firstname: str, lastname: str) -> dict:
    return {
        "firstname": firstname,
        "lastname": lastname,
        "email": f"{fake.user_name()[:20]}.{uuid.uuid4().hex[:4]}@{fake.free_email_domain()}",
        "phone": fake.msisdn()[:15],
        "address1": fake.street_address()[:255],
        "city": fake.city()[:100],
        "state": fake.state_abbr(),
        "zip": fake.zipcode()[:20],
    }


def order_data(legacy_id: int, name: str, price: float, firstname: str, lastname: str) -> dict:
    quantity = random.randint(1, 3)
    return {
        "items": [{"id": legacy_id, "name": name, "quantity": quantity, "price": price}],
        "total": round(price * quantity, 2),
        "user": customer_data(firstname, lastname),
    }


def review_data(user: str) -> dict:
    return {
        "user": user,
        "rating": random.choices([1, 2, 3, 4, 5], weights=[1, 1, 2, 4, 6])[0],
        "comment": fake.sentence(nb_words=15),
    }
