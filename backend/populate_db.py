import os
import sys
import random
from datetime import date, timedelta
from decimal import Decimal
from types import SimpleNamespace

import pandas as pd

# Add 'backend' folder to Python path
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

# Database models and setup
from database import SessionLocal, init_db
from models.due import DueEntry
from models.product import Product
from models.purchase_order import PurchaseOrder
from models.sales import SalesItem, SalesRecord, Seller
from services import dues, product_ledger, purchase_orders, sales
from utils.errors import LedgerError
from utils.money import to_money

# Configuration
DATA_DIR = os.path.join(os.path.dirname(__file__), "data_source")
PRODUCTS_CSV = os.path.join(DATA_DIR, "products.csv")
REQUIRED_COLUMNS = ["name", "initial_stock", "buying_price", "selling_price"]
DEMO_SELLERS = ["Acme", "Bright Traders", "Corner Supply"]
DEMO_SHOPS = ["CornerStore", "Main St Grocery", "Night Market", "Station Kiosk"]
DEMO_SALES = 40
# End Configuration


def load_products_frame(path: str) -> pd.DataFrame:
    """Read and clean a products CSV: required columns, no blanks, no negatives."""
    df = pd.read_csv(path)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns in {path}: {', '.join(missing)}")

    df = df[REQUIRED_COLUMNS].dropna().copy()
    df["name"] = df["name"].astype(str).str.strip()
    df = df[df["name"] != ""].copy()
    df["initial_stock"] = df["initial_stock"].astype(int)
    df = df[(df["initial_stock"] >= 0) & (df["buying_price"] >= 0) & (df["selling_price"] >= 0)]
    return df.drop_duplicates(subset=["name"]).reset_index(drop=True)


def import_products(session, df: pd.DataFrame) -> int:
    count = 0
    for row in df.itertuples(index=False):
        product_ledger.create_product(
            session,
            name=row.name,
            initial_stock=int(row.initial_stock),
            buying_price=str(row.buying_price),
            selling_price=str(row.selling_price),
        )
        count += 1
    return count


def generate_activity(session, seed: int = 7) -> int:
    """Synthetic purchase orders, sales and dues over the last ~90 days."""
    rng = random.Random(seed)
    products = product_ledger.list_products(session)
    if not products:
        return 0

    # Restock a third of the catalogue
    for product in rng.sample(products, k=max(1, len(products) // 3)):
        order = purchase_orders.create_order(
            session, product_id=product.id, quantity=rng.randint(5, 50), buying_price=product.buying_price
        )
        if rng.random() < 0.7:
            purchase_orders.mark_delivered(session, order.id)

    created = 0
    for _ in range(DEMO_SALES):
        picks = rng.sample(products, k=min(len(products), rng.randint(1, 3)))
        lines = []
        for product in picks:
            session.refresh(product)
            if product.remaining_quantity < 1:
                continue
            lines.append(SimpleNamespace(
                product_id=product.id,
                quantity=rng.randint(1, min(5, product.remaining_quantity)),
                selling_price=product.selling_price,
            ))
        if not lines:
            continue
        total = sum(line.quantity * line.selling_price for line in lines)
        try:
            sales.create_sale(
                session,
                seller_name=rng.choice(DEMO_SELLERS),
                items=lines,
                total_due_amount=to_money(total * Decimal(rng.choice(["0", "0", "0.25", "0.5"]))),
                sale_date=date.today() - timedelta(days=rng.randint(0, 90)),
            )
            created += 1
        except LedgerError as exc:
            print(f"Sale skipped: {exc.message}")

    for seller in DEMO_SELLERS:
        for _ in range(rng.randint(0, 3)):
            dues.create_due(
                session,
                seller_name=seller,
                shop_name=rng.choice(DEMO_SHOPS),
                due_amount=round(rng.uniform(5.0, 120.0), 2),
                date_added=date.today() - timedelta(days=rng.randint(0, 60)),
            )
    return created


def populate_database():
    """Main execution function to populate database."""
    init_db()
    session = SessionLocal()

    # Clean existing data
    for model in (SalesItem, SalesRecord, Seller, DueEntry, PurchaseOrder, Product):
        session.query(model).delete()
    session.commit()

    try:
        df = load_products_frame(PRODUCTS_CSV)
    except FileNotFoundError:
        print(f"Error: {PRODUCTS_CSV} not found. Put a products CSV there first.")
        session.close()
        return

    imported = import_products(session, df)
    print(f"Imported {imported} products.")
    print(f"Generated {generate_activity(session)} sales records.")
    session.close()


if __name__ == "__main__":
    populate_database()
