#!/usr/bin/env python3
"""
Seed demo data into the local SQLite store

Usage:
  python scripts/seed_demo_data.py           # insert demo rows
  python scripts/seed_demo_data.py --reset   # wipe the four tables first

Contents:
  - matrícula 1001: active plan, 6 months of income/expense, 3 cards, 5 reminders
  - matrícula 2002: inactive plan (login shows the blocked screen)
"""

import sys
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import db
from config import CARDS_TABLE, REMINDERS_TABLE, TRANSACTIONS_TABLE, USERS_TABLE, TransactionType
from db.connection import get_connection
from db.sqlite_store import SqliteStore


def clear_data():
    """Delete every row (children first)."""
    conn = get_connection()
    try:
        for table in (TRANSACTIONS_TABLE, CARDS_TABLE, REMINDERS_TABLE, USERS_TABLE):
            conn.execute(f"DELETE FROM {table}")
        conn.commit()
    finally:
        conn.close()
    print("✅ Dados apagados")


def seed_users(store):
    users = [
        ("1001", "Ana Souza", "ana@example.com", "+55 11 90000-1001", True,
         (date.today() + timedelta(days=180)).isoformat()),
        ("2002", "Bruno Lima", "bruno@example.com", None, False, None),
    ]
    ids = {}
    for matricula, name, email, phone, active, expires in users:
        existing = db.users.get_by_matricula(store, matricula)
        if existing:
            ids[matricula] = existing["id"]
            continue
        row = store.insert(USERS_TABLE, {
            "matricula": matricula, "name": name, "email": email, "phone": phone,
            "active_plan": active, "plan_expires_at": expires,
        })
        ids[matricula] = row["id"]
    print(f"✅ Usuários ({len(users)})")
    return ids


def seed_transactions(store, user_id):
    """Six months of salary + recurring spend."""
    monthly = [
        (TransactionType.INCOME,  "5200.00", "Salário",     "Salário mensal"),
        (TransactionType.INCOME,  "850.00",  "Freelance",   "Projeto freelance"),
        (TransactionType.EXPENSE, "1800.00", "Moradia",     "Aluguel"),
        (TransactionType.EXPENSE, "920.35",  "Alimentação", "Supermercado"),
        (TransactionType.EXPENSE, "310.90",  "Transporte",  "Combustível"),
        (TransactionType.EXPENSE, "89.90",   "Assinaturas", "Streaming + música"),
        (TransactionType.EXPENSE, "240.00",  None,          "Diversos"),
    ]
    today = date.today().replace(day=1)
    count = 0
    for back in range(5, -1, -1):
        month = month_start(today, back)
        for day, (tx_type, amount, category, description) in enumerate(monthly, start=2):
            store.insert(TRANSACTIONS_TABLE, {
                "user_id": user_id,
                "amount": Decimal(amount),
                "type": tx_type,
                "category": category,
                "description": description,
                "created_at": f"{month.replace(day=day).isoformat()} 12:00:00",
            })
            count += 1
    print(f"✅ Transações ({count})")


def month_start(first_of_month: date, months_back: int) -> date:
    year, month = first_of_month.year, first_of_month.month - months_back
    while month < 1:
        month += 12
        year -= 1
    return date(year, month, 1)


def seed_cards(store, user_id):
    cards = [
        ("Nubank",   "5000.00", "1830.40", 3, 10),
        ("Itaú",     "8000.00", "2410.00", 25, 5),
        ("Inter",    "2000.00", "150.00",  12, 20),
    ]
    for name, limit, used, closing, due in cards:
        store.insert(CARDS_TABLE, {
            "user_id": user_id, "card_name": name,
            "limit_amount": Decimal(limit), "used_amount": Decimal(used),
            "closing_day": closing, "due_day": due,
        })
    print(f"✅ Cartões ({len(cards)})")


def seed_reminders(store, user_id):
    today = date.today()
    reminders = [
        ("Conta de luz",      3,   "187.40", "pending"),
        ("Internet",          7,   "99.90",  "pending"),
        ("Fatura Nubank",     10,  "1830.40", "pending"),
        ("IPVA",              -4,  "1260.00", "pending"),
        ("Academia",          -12, "119.00", "done"),
    ]
    for title, offset, amount, status in reminders:
        store.insert(REMINDERS_TABLE, {
            "user_id": user_id, "title": title,
            "due_date": (today + timedelta(days=offset)).isoformat(),
            "amount": Decimal(amount), "status": status,
        })
    print(f"✅ Lembretes ({len(reminders)})")


def main():
    reset = "--reset" in sys.argv

    print("=" * 50)
    print("🌱 Inserindo dados de demonstração")
    print("=" * 50)

    store = SqliteStore()
    if reset:
        clear_data()

    ids = seed_users(store)
    seed_transactions(store, ids["1001"])
    seed_cards(store, ids["1001"])
    seed_reminders(store, ids["1001"])

    print("=" * 50)
    print("✅ Pronto! Rode `streamlit run app.py` e entre com a matrícula 1001")
    print("=" * 50)


if __name__ == "__main__":
    main()
