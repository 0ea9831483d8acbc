#!/usr/bin/env python3
"""
Load example users and products into an empty database.

Seeding is skipped when any user or product already exists.

Usage:
    python scripts/seed.py
"""
from decimal import Decimal

from inventory_api.core.security import hash_password
from inventory_api.db.session import init_db, session_scope
from inventory_api.models.models import Product, User
from inventory_api.services.inventory import stock_status
from inventory_api.services.inventory.alert_generator import DEFAULT_THRESHOLD

USERS = [
    ("admin@inventory.com", "admin123"),
    ("manager@inventory.com", "manager123"),
    ("user@inventory.com", "user123"),
]

# (name, description, quantity, price, category)
PRODUCTS = [
    ("Laptop Dell XPS 13", "13-inch ultrathin laptop with Intel Core i7", 15, "1299.99", "Electronics"),
    ("iPhone 14 Pro", "Apple smartphone with 48MP pro camera", 8, "1099.99", "Electronics"),
    ("Office Desk", "Ergonomic wooden desk with drawers", 25, "299.99", "Furniture"),
    ("Executive Chair", "Ergonomic chair with lumbar support and armrests", 12, "199.99", "Furniture"),
    ("Samsung 4K Monitor", "27-inch 4K UHD monitor", 20, "399.99", "Electronics"),
    ("Mechanical Keyboard", "RGB gaming keyboard with Cherry MX switches", 30, "129.99", "Electronics"),
    ("Wireless Mouse", "Ergonomic wireless mouse with optical sensor", 45, "59.99", "Electronics"),
    ("LED Lamp", "Desk LED lamp with touch control", 18, "79.99", "Lighting"),
    ("Automatic Coffee Maker", "Programmable coffee maker with built-in grinder", 10, "249.99", "Appliances"),
    ("Bluetooth Headphones", "Wireless noise-cancelling headphones", 35, "199.99", "Electronics"),
    ("iPad Pro Tablet", "Professional tablet with Liquid Retina display", 3, "799.99", "Electronics"),
    ("Laser Printer", "Multifunction office laser printer", 2, "349.99", "Office Equipment"),
    ("HD Webcam", "Full HD webcam for video calls", 4, "89.99", "Electronics"),
    ("SSD Drive", "1TB solid state drive with SATA III interface", 1, "149.99", "Electronics"),
    ("WiFi 6 Router", "High-speed WiFi 6 wireless router", 0, "179.99", "Electronics"),
]


def seed(db) -> bool:
    """Insert the example data; return False when the database is not empty."""
    user_count = db.query(User).count()
    product_count = db.query(Product).count()
    if user_count or product_count:
        print("⚠️  Database already contains data. Skipping seed...")
        print(f"   Users: {user_count}, Products: {product_count}")
        return False

    print("👤 Creating example users...")
    for email, password in USERS:
        db.add(User(email=email, password_hash=hash_password(password)))
        print(f"   ✅ Created user: {email}")

    print("📦 Creating example products...")
    for name, description, quantity, price, category in PRODUCTS:
        db.add(
            Product(
                name=name,
                description=description,
                quantity=quantity,
                price=Decimal(price),
                category=category,
            )
        )
        print(f"   ✅ Created product: {name} (Stock: {quantity} - {stock_status(quantity).value})")
    db.flush()

    low_stock = db.query(Product).filter(Product.quantity < DEFAULT_THRESHOLD).count()
    out_of_stock = db.query(Product).filter(Product.quantity == 0).count()

    print("\n📊 Seeding Summary:")
    print(f"   👤 Users created: {db.query(User).count()}")
    print(f"   📦 Products created: {db.query(Product).count()}")
    print("\n⚠️  Stock Status:")
    print(f"   📉 Low stock products (< {DEFAULT_THRESHOLD}): {low_stock}")
    print(f"   🚫 Out of stock products: {out_of_stock}")
    print("\n🔑 Test Credentials:")
    for email, password in USERS:
        print(f"   Email: {email} | Password: {password}")
    return True


def main():
    init_db()
    print("🌱 Starting database seeding...")
    with session_scope() as db:
        if seed(db):
            print("\n✅ Database seeding completed successfully!")


if __name__ == "__main__":
    main()
