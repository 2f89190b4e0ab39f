import argparse
import sys

from rich.console import Console
from rich.table import Table

from config import load_catalog, settings
from shopsphere.cart import money
from shopsphere.catalog import CatalogState
from shopsphere.demo_data import DEMO_PRODUCTS
from shopsphere.errors import RecordServiceError
from shopsphere.icons import render_rating
from shopsphere.logging_config import setup_logging
from shopsphere.services.registry import SERVICE_TYPES, build_services

console = Console()


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("storefront_service:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def cmd_catalog(args: argparse.Namespace) -> int:
    products = load_catalog(args.catalog) if args.catalog else DEMO_PRODUCTS
    catalog = CatalogState(products, default_price_range=(settings.price_min, settings.price_max))
    catalog.set_search(args.search)
    catalog.set_category(args.category)
    catalog.set_price_range(args.min_price, args.max_price)
    catalog.set_sort(args.sort)

    table = Table(title=f"Catalog ({len(catalog.visible)} of {len(catalog.items)})")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Price", justify="right")
    table.add_column("Rating")
    for item in catalog.visible:
        table.add_row(
            str(item.id), item.name, item.category, money(item.price), render_rating(item.rating)
        )
    console.print(table)
    if not catalog.visible:
        console.print("[yellow]No products found. Try adjusting your search or filter criteria.[/yellow]")
    return 0


def cmd_records(args: argparse.Namespace) -> int:
    service = build_services()[args.entity]
    try:
        records = service.list()
    except RecordServiceError as exc:
        console.print(f"[red]Failed to load {args.entity}: {exc}[/red]")
        return 1

    table = Table(title=f"{args.entity} ({len(records)})")
    for name in service.fields:
        table.add_column(name)
    for record in records:
        table.add_row(*(str(record.get(name, "")) for name in service.fields))
    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ShopSphere storefront tools.")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the storefront API with uvicorn")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true")
    serve.set_defaults(func=cmd_serve)

    catalog = sub.add_parser("catalog", help="Print the filtered catalog")
    catalog.add_argument("--search", default="")
    catalog.add_argument("--category", default="all")
    catalog.add_argument("--min-price", type=float, default=settings.price_min)
    catalog.add_argument("--max-price", type=float, default=settings.price_max)
    catalog.add_argument(
        "--sort",
        default="featured",
        help="featured, price-ascending, price-descending or rating-descending",
    )
    catalog.add_argument("--catalog", default=settings.catalog_path, help="YAML catalog file")
    catalog.set_defaults(func=cmd_catalog)

    records = sub.add_parser("records", help="List backend records for an entity")
    records.add_argument("entity", choices=sorted(SERVICE_TYPES))
    records.set_defaults(func=cmd_records)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(settings.log_level, settings.log_format)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
