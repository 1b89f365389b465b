#!/usr/bin/env python3
"""
Seed script to create demo reservations
"""

from datetime import timedelta

from frontdesk.clock import date_key


DEMO_RESERVATIONS = [
    # (day offset, time, name, phone, email, party size, table, status, notes)
    (0, "18:00", "Ana Kowalska", "+48 600 100 200", "ana@example.com", 2, 4, "confirmed", "Window seat"),
    (0, "19:30", "Marco Rossi", "+39 333 123 4567", "marco@example.com", 6, 12, "confirmed", "Birthday dinner"),
    (0, "20:00", "Julia Nowak", "+48 501 222 333", "", 4, None, "pending", None),
    (1, "17:30", "Tom Becker", "+49 151 2345 678", "tom@example.com", 3, None, "confirmed", None),
    (1, "21:00", "Sofia Lind", "", "sofia@example.com", 8, 7, "pending", "Needs high chair"),
]


def seed_demo_data():
    """Seed demo data for development"""
    from frontdesk.config import get_settings
    from frontdesk.main import configure_logging, create_store

    settings = get_settings()
    configure_logging(settings)
    store = create_store(settings)

    if store.reservations:
        print("Demo data already exists. Skipping...")
        return

    print(f"Creating demo reservations for {settings.restaurant_name}...")

    now = store.clock()
    for offset, time, name, phone, email, party_size, table, status, notes in DEMO_RESERVATIONS:
        reservation = store.create({
            "customer_name": name,
            "customer_phone": phone,
            "customer_email": email,
            "party_size": party_size,
            "date": date_key(now + timedelta(days=offset)),
            "time": time,
            "table_number": table,
            "status": status,
            "notes": notes,
        })
        print(f"Created reservation: {reservation.customer_name} {reservation.date} {reservation.time}")

    if store.last_persist_error:
        print(f"Warning: reservations were not saved: {store.last_persist_error}")
        return

    print(f"""
Demo data created successfully!

Storage: {settings.storage_url}
Slot: {settings.storage_slot}
Reservations: {len(store.reservations)} created
""")


if __name__ == "__main__":
    seed_demo_data()
