from __future__ import annotations

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.products.models import Product

CATALOG = [
    ("Monitor Curvo 49 Pulgadas", 399.00, True),
    ("Teclado Mecánico", 89.90, True),
    ("Mouse Inalámbrico", 50.00, True),
    ("Audífonos Bluetooth", 129.99, False),
    ("Laptop 14 Pulgadas", 999.00, True),
]


class Command(BaseCommand):
    help = "Seed the products table with a demo catalogue, or clear it."

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete every product instead of seeding.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["clear"]:
            deleted, _ = Product.objects.all().delete()
            self.stdout.write(self.style.SUCCESS(f"Products cleared: {deleted}"))
            return

        self.stdout.write("Creating products...")
        created = 0
        for name, price, availability in CATALOG:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={"price": price, "availability": availability},
            )
            created += int(was_created)
        self.stdout.write(self.style.SUCCESS(f"Seed completed: products={created}"))
