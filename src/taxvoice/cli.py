"""Command-line interface for taxvoice."""

import argparse
import csv
import json
import logging
import random
import sys
from pathlib import Path
from typing import Optional

from .config import Settings
from .letter import generate_standard_email
from .linkcheck import LinkChecker
from .prompt import generate_compact_prompt, generate_prompt
from .service import parse_items
from .spending import dollars_for, find_item, get_tax_spending
from .suggestions.catalog import CatalogError, default_catalog
from .suggestions.core import ResourceSuggester
from .suggestions.filters import ResourceFilter, facets, paginate
from .suggestions.models import BadgeType, OrgType, RankClass, SuggestedResource, UserConcern

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, level: str = "INFO"):
    """Configure logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.INFO),
        format="%(message)s",
        handlers=[logging.StreamHandler()]
    )
    # Quiet down requests library
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def parse_item_arg(text: str) -> UserConcern:
    """Parse an ``ID=VALUE`` argument into a concern.

    VALUE is a level from -2 to 2 or a 0-100 slider position; the
    description and category come from the spending data when the id is known.
    """
    item_id, sep, value = text.partition("=")
    item_id = item_id.strip()
    if not item_id:
        raise argparse.ArgumentTypeError(f"missing item id in {text!r}")
    try:
        level = float(value) if sep else 0.0
    except ValueError:
        raise argparse.ArgumentTypeError(f"funding value for {item_id!r} must be a number") from None

    found = find_item(item_id)
    if found:
        category, item = found
        return UserConcern(id=item.id, description=item.description, category=category.name, funding_level=level)
    logger.warning(f"Unknown spending item {item_id!r}; it will only match its own tag")
    return UserConcern(id=item_id, description=item_id.replace("_", " "), funding_level=level)


def load_items(path: Path) -> list[UserConcern]:
    """Load concerns from a JSON file (a list, or {"selectedItems": [...]})."""
    if not path.exists():
        raise FileNotFoundError(f"Items file not found: {path}")
    data = json.loads(path.read_text())
    if isinstance(data, list):
        data = {"selectedItems": data}
    return parse_items(data, "selectedItems")


def write_csv(resources: list[SuggestedResource], output_path: Path) -> int:
    """Write suggestions to a CSV file."""
    fieldnames = [
        "name", "url", "main_category", "prominence", "match_count",
        "rank", "badges", "reasons", "relevance"
    ]

    rows = []
    for resource in resources:
        rows.append({
            "name": resource.name,
            "url": resource.url,
            "main_category": resource.entry.main_category,
            "prominence": resource.entry.prominence.value,
            "match_count": resource.match_count,
            "rank": resource.rank.value if resource.rank else "",
            "badges": "; ".join(b.value for b in resource.badges),
            "reasons": "; ".join(r.original_concern for r in resource.matched_reasons),
            "relevance": resource.relevance,
        })

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)

    return len(rows)


def write_json(data, output_path: Optional[Path]):
    """Write JSON to a file, or stdout when no path is given."""
    text = json.dumps(data, indent=2)
    if output_path is None:
        print(text)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(text)


def print_resources(resources: list[SuggestedResource], total: int, has_more: bool):
    print(f"\n{'='*70}")
    print("FURTHER ACTION SUGGESTIONS")
    print(f"{'='*70}")
    if not resources:
        print("No organizations matched your concerns.")
        return
    for i, resource in enumerate(resources, 1):
        badges = ", ".join(b.value for b in resource.badges)
        print(f"\n{i}. {resource.name}  [{badges}]")
        print(f"   {resource.url}")
        print(f"   Matches: {resource.match_count}  |  {resource.entry.main_category}")
        print(f"   {resource.relevance}")
    if has_more:
        print(f"\n... {total - len(resources)} more (use --page to show more)")


def cmd_suggest(args, settings: Settings) -> int:
    concerns = list(args.items)
    if args.items_file:
        concerns.extend(load_items(args.items_file))

    seed = args.seed if args.seed is not None else settings.seed
    rng = random.Random(seed) if seed is not None else None
    max_suggestions = args.max if args.max is not None else settings.max_suggestions
    suggester = ResourceSuggester(rng=rng, max_suggestions=max_suggestions)
    results = suggester.suggest(
        concerns,
        aggressiveness=args.aggressiveness,
        balance_budget=args.balance_budget,
        include_unmatched=args.all,
    )

    selection = ResourceFilter(
        categories=set(args.category or []),
        org_types={OrgType(t) for t in args.org_type or []},
        badges={BadgeType(b) for b in args.badge or []},
        ranks={RankClass(r) for r in args.rank or []},
    )
    filtered = selection.apply(results)

    if args.facets:
        write_json({k: [getattr(v, "value", v) for v in vals] for k, vals in facets(results).items()}, None)
        return 0

    if args.format == "json":
        write_json([r.to_dict() for r in filtered], args.output)
    elif args.format == "csv":
        output_path = args.output or Path("output/suggestions.csv")
        count = write_csv(filtered, output_path)
        print(f"Wrote {count} suggestion(s) to {output_path}")
    else:
        page = paginate(filtered, page=args.page, page_size=args.page_size)
        print_resources(page.items, page.total, page.has_more)
    return 0


def cmd_prompt(args, settings: Settings) -> int:
    concerns = list(args.items)
    if args.items_file:
        concerns.extend(load_items(args.items_file))
    render = generate_compact_prompt if args.compact else generate_prompt
    print(render(concerns, args.aggressiveness, args.name, args.location, args.balance_budget))
    return 0


def cmd_email(args, settings: Settings) -> int:
    concerns = list(args.items)
    if args.items_file:
        concerns.extend(load_items(args.items_file))
    email = generate_standard_email(concerns, args.aggressiveness, args.name, args.location, args.balance_budget)
    if args.format == "json":
        write_json(email.to_dict(), args.output)
    else:
        print(f"Subject: {email.subject}\n")
        print(email.body)
    return 0


def cmd_spending(args, settings: Settings) -> int:
    categories = get_tax_spending(tax_amount=args.tax_amount)
    if args.format == "json":
        write_json([c.to_dict() for c in categories], args.output)
        return 0
    for category in categories:
        print(f"\n{category.name:<30} {category.percentage:6.2f}%")
        for item in category.items:
            amount = f"${dollars_for(item, args.tax_amount):,.2f}" if args.tax_amount else ""
            print(f"    {item.id:<28} {item.description[:40]:<40} {amount}")
    return 0


def cmd_validate_catalog(args, settings: Settings) -> int:
    try:
        catalog = default_catalog()
    except CatalogError as e:
        for problem in e.problems:
            print(f"[!] {problem}", file=sys.stderr)
        return 1
    print(f"[OK] {len(catalog)} organizations, {len(catalog.tags)} distinct tags")
    return 0


def cmd_check_links(args, settings: Settings) -> int:
    checker = LinkChecker(timeout=args.timeout or settings.http_timeout, user_agent=settings.user_agent)
    statuses = checker.check(default_catalog())
    broken = [s for s in statuses if not s.ok]

    if args.format == "json":
        write_json([s.to_dict() for s in statuses], args.output)
    else:
        for status in statuses:
            mark = "OK" if status.ok else "!!"
            detail = status.status_code if status.status_code is not None else status.error
            print(f"[{mark}] {status.name}: {detail}")

    print(f"\n{len(statuses) - len(broken)}/{len(statuses)} links reachable")
    return 1 if broken else 0


def _add_item_args(sub: argparse.ArgumentParser):
    sub.add_argument(
        "items",
        nargs="*",
        type=parse_item_arg,
        help="Spending items as ID=VALUE (e.g., medicaid=-2 or pentagon=5)"
    )
    sub.add_argument(
        "-i", "--items-file",
        type=Path,
        help="JSON file with selected items"
    )
    sub.add_argument(
        "-a", "--aggressiveness",
        type=float,
        default=50,
        help="Tone from 0 (kind) to 100 (angry) (default: 50)"
    )
    sub.add_argument(
        "-b", "--balance-budget",
        action="store_true",
        help="Include balancing the budget as a concern"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taxvoice",
        description="Match federal spending preferences to advocacy organizations"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    suggest = subparsers.add_parser("suggest", help="Suggest organizations for your concerns")
    _add_item_args(suggest)
    suggest.add_argument("--all", action="store_true", help="Also list organizations that match nothing")
    suggest.add_argument("--seed", type=int, help="Seed for badge selection")
    suggest.add_argument("--max", type=int, help="Maximum number of suggestions")
    suggest.add_argument("--category", action="append", help="Filter by main category (repeatable)")
    suggest.add_argument("--org-type", action="append", choices=[t.value for t in OrgType])
    suggest.add_argument("--badge", action="append", choices=[b.value for b in BadgeType])
    suggest.add_argument("--rank", action="append", choices=[r.value for r in RankClass])
    suggest.add_argument("--page", type=int, default=1, help="Pages of results to show (default: 1)")
    suggest.add_argument("--page-size", type=int, default=10, help="Results per page (default: 10)")
    suggest.add_argument("--facets", action="store_true", help="List available filter values and exit")
    suggest.add_argument("--format", choices=["table", "json", "csv"], default="table")
    suggest.add_argument("-o", "--output", type=Path, help="Output file path")
    suggest.set_defaults(func=cmd_suggest)

    prompt = subparsers.add_parser("prompt", help="Print an AI email-drafting prompt")
    _add_item_args(prompt)
    prompt.add_argument("--name", default="", help="Your name")
    prompt.add_argument("--location", default="", help="Your location")
    prompt.add_argument("--compact", action="store_true", help="Use the short prompt")
    prompt.set_defaults(func=cmd_prompt)

    email = subparsers.add_parser("email", help="Print the standard email to your representative")
    _add_item_args(email)
    email.add_argument("--name", default="", help="Your name")
    email.add_argument("--location", default="", help="Your location")
    email.add_argument("--format", choices=["text", "json"], default="text")
    email.add_argument("-o", "--output", type=Path, help="Output file path")
    email.set_defaults(func=cmd_email)

    spending = subparsers.add_parser("spending", help="Show the federal spending breakdown")
    spending.add_argument("--tax-amount", type=float, help="Your federal income tax, in dollars")
    spending.add_argument("--format", choices=["table", "json"], default="table")
    spending.add_argument("-o", "--output", type=Path, help="Output file path")
    spending.set_defaults(func=cmd_spending)

    validate = subparsers.add_parser("validate-catalog", help="Check the organization catalog for defects")
    validate.set_defaults(func=cmd_validate_catalog)

    links = subparsers.add_parser("check-links", help="Check that organization websites respond")
    links.add_argument("--timeout", type=int, help="Seconds per request")
    links.add_argument("--format", choices=["table", "json"], default="table")
    links.add_argument("-o", "--output", type=Path, help="Output file path")
    links.set_defaults(func=cmd_check_links)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"Error in configuration: {e}", file=sys.stderr)
        return 2

    setup_logging(args.verbose, settings.log_level)

    try:
        return args.func(args, settings)
    except (FileNotFoundError, json.JSONDecodeError, KeyError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
