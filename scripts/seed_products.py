#!/usr/bin/env python3
"""
Seed the products table with deterministic random data.

Features:
- Deterministic: fixed seed → same catalog every run
- Idempotent: safe to run multiple times (clears before seeding)
- Realism-lite: prices banded per category, roughly 1 in 4 products on offer

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_products.py
"""

from __future__ import annotations

import random
import sys
from decimal import Decimal
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import delete

from rona_catalog.infra.db.models.product import ProductRow
from rona_catalog.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_PRODUCTS = 120
OFFER_PROBABILITY = 0.25
FEATURED_PROBABILITY = 0.10


# ==============================================================================
# Catalog Data
# ==============================================================================

# Category id → (product names, price band in BRL)
CATEGORIES = {
    "cat-fios-e-cabos": (
        ["Fio Flexível 2,5mm² 100m", "Cabo PP 3x1,5mm 50m", "Fio Rígido 4mm² 100m"],
        (Decimal("40"), Decimal("450")),
    ),
    "cat-disjuntores": (
        ["Disjuntor Bipolar 25A", "Disjuntor Monopolar 16A", "Disjuntor DR 40A"],
        (Decimal("15"), Decimal("320")),
    ),
    "cat-tubos-e-conexoes": (
        ["Tubo PVC 32mm 6m", "Joelho 90° 25mm", "Registro de Gaveta 3/4"],
        (Decimal("3"), Decimal("120")),
    ),
    "cat-ferramentas": (
        ["Furadeira de Impacto 650W", "Alicate Universal 8\"", "Chave de Fenda Isolada"],
        (Decimal("20"), Decimal("900")),
    ),
    "cat-iluminacao": (
        ["Lâmpada LED 12W Branco Frio", "Refletor LED 50W", "Plafon LED 18W"],
        (Decimal("8"), Decimal("250")),
    ),
    "cat-bombas": (
        ["Bomba Centrífuga 1/2CV", "Pressurizador 120W", "Bomba Submersa 1CV"],
        (Decimal("250"), Decimal("2500")),
    ),
}

BRANDS = ["brand-prysmian", "brand-schneider", "brand-tigre", "brand-bosch", "brand-philips", "brand-weg"]


# ==============================================================================
# Seed Generation
# ==============================================================================


def random_price(low: Decimal, high: Decimal) -> Decimal:
    cents = random.randint(int(low * 100), int(high * 100))
    # Retail prices end in ,90
    return (Decimal(cents) / 100).quantize(Decimal("1")) - Decimal("0.10")


def generate_product(index: int) -> ProductRow:
    """Generate a single random product."""
    category_id = random.choice(list(CATEGORIES.keys()))
    names, (low, high) = CATEGORIES[category_id]
    brand_id = random.choice(BRANDS)
    brand_name = brand_id.removeprefix("brand-").capitalize()
    name = f"{random.choice(names)} - {brand_name}"

    price = max(random_price(low, high), Decimal("0.90"))
    compare_price = None
    if random.random() < OFFER_PROBABILITY:
        markup = Decimal(str(random.uniform(1.05, 1.40)))
        compare_price = (price * markup).quantize(Decimal("0.01"))

    return ProductRow(
        name=name,
        sku=f"RN-{index:05d}",
        description=f"{name}. Produto original com nota fiscal.",
        category_id=category_id,
        brand_id=brand_id,
        price=price,
        compare_price=compare_price,
        stock_quantity=random.choices([0, random.randint(1, 500)], weights=[1, 9], k=1)[0],
        is_featured=random.random() < FEATURED_PROBABILITY,
        is_active=True,
        image_urls=[f"/images/products/rn-{index:05d}.jpg"],
        rating=Decimal(str(round(random.uniform(3.5, 5.0), 1))),
    )


def seed_products(num_products: int = NUM_PRODUCTS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with random product data.

    Args:
        num_products: Number of products to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding catalog with {num_products} products (seed={seed})...")

    with get_session() as session:
        deleted_count = session.execute(delete(ProductRow)).rowcount
        print(f"   Deleted {deleted_count} existing products")

        products = [generate_product(i) for i in range(1, num_products + 1)]
        session.add_all(products)
        session.flush()

        on_offer = sum(1 for p in products if p.compare_price is not None)
        print(f"✅ Seeded {len(products)} products ({on_offer} on offer)")

        for i, product in enumerate(products[:5], 1):
            print(f"   {i}. {product.sku} {product.name} - R$ {product.price:,.2f}")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_products()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
