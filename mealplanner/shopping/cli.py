"""CLI entry point for the shopping module."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .aisles import classify_ingredient
from .config import load_config
from .lists import (
    EmptyShoppingListError,
    InvalidMealPlanError,
    ItemIndexError,
    ShoppingList,
    build_shopping_list,
)
from .parser import parse_ingredients_summary


def main(argv: list[str] | None = None) -> None:
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="mealplanner-shopping",
        description="Liste d'épicerie : regroupe les ingrédients d'un plan de repas par rayon",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Chemin du fichier de configuration (TOML)",
    )

    sub = parser.add_subparsers(dest="command")

    # parse
    parse_parser = sub.add_parser("parse", help="Analyser une liste d'ingrédients")
    parse_parser.add_argument("summary", type=str, help='ex. "2 cups flour, 1 gousse ail"')
    parse_parser.add_argument("--json", action="store_true", help="Sortie JSON")

    # classify
    classify_parser = sub.add_parser("classify", help="Trouver le rayon d'un ingrédient")
    classify_parser.add_argument("names", type=str, nargs="+")
    classify_parser.add_argument("--json", action="store_true", help="Sortie JSON")

    # build
    build_parser = sub.add_parser("build", help="Générer la liste depuis un plan de repas")
    build_parser.add_argument("plan", type=str, help="Plan de repas (JSON)")
    build_parser.add_argument(
        "--catalog", type=str, default=None, metavar="FILE",
        help="Ingrédients des recettes du catalogue (JSON)",
    )
    build_parser.add_argument(
        "--user-recipes", type=str, default=None, metavar="FILE",
        help="Ingrédients des recettes personnelles (JSON)",
    )
    build_parser.add_argument("--json", action="store_true", help="Sortie JSON")

    # show
    show_parser = sub.add_parser("show", help="Afficher une liste enregistrée")
    show_parser.add_argument("list_file", type=str, help="Liste d'épicerie (JSON)")
    show_parser.add_argument(
        "--toggle", type=int, default=None, metavar="INDEX",
        help="Cocher un article et enregistrer",
    )
    show_parser.add_argument(
        "--uncheck", action="store_true",
        help="Avec --toggle : décocher au lieu de cocher",
    )
    show_parser.add_argument("--json", action="store_true", help="Sortie JSON")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config(args.config or os.environ.get("MEALPLANNER_CONFIG"))
    except ValueError as e:
        # TOMLDecodeError is a ValueError
        print(f"Configuration invalide: {e}", file=sys.stderr)
        sys.exit(1)

    level = logging.getLevelName(config.logging.level)
    if not isinstance(level, int):
        print(
            f"Niveau de journalisation inconnu: {config.logging.level!r}",
            file=sys.stderr,
        )
        sys.exit(1)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    match args.command:
        case "parse":
            _cmd_parse(args)
        case "classify":
            _cmd_classify(args)
        case "build":
            _cmd_build(config, args)
        case "show":
            _cmd_show(config, args)


def _read_json(path: str) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        print(f"Fichier introuvable: {path}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"JSON invalide dans {path}: {e}", file=sys.stderr)
        sys.exit(1)


def _recipe_map(path: str | None) -> dict[str, list[dict]]:
    """Load recipe ingredients as {id: [...]} or as [{"id", "ingredients"}] rows."""
    if path is None:
        return {}
    data = _read_json(path)
    if isinstance(data, dict):
        return data
    if isinstance(data, list) and all(
        isinstance(row, dict) and "id" in row for row in data
    ):
        return {row["id"]: row.get("ingredients") or [] for row in data}
    print(
        f"Recettes invalides dans {path}: objet {{id: [...]}} ou liste de "
        f"{{\"id\", \"ingredients\"}} attendu",
        file=sys.stderr,
    )
    sys.exit(1)


def _cmd_parse(args) -> None:
    ingredients = parse_ingredients_summary(args.summary)
    if args.json:
        data = [
            {"name": i.name, "quantity": i.quantity, "unit": i.unit}
            for i in ingredients
        ]
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return
    for i in ingredients:
        unit = f" {i.unit}" if i.unit else ""
        print(f"  {i.quantity:g}{unit}  {i.name}")


def _cmd_classify(args) -> None:
    results = [(name, classify_ingredient(name)) for name in args.names]
    if args.json:
        data = [
            {
                "name": name,
                "aisle": info.aisle,
                "category": info.category,
                "emoji": info.emoji,
                "sortOrder": info.sort_order,
            }
            for name, info in results
        ]
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return
    for name, info in results:
        print(f"  {info.emoji} {name:<24} {info.aisle}")


def _cmd_build(config, args) -> None:
    data = _read_json(args.plan)

    # Saved plans wrap the generated plan under "meals"
    meal_plan_id = None
    if isinstance(data, dict) and "days" not in data and isinstance(data.get("meals"), dict):
        meal_plan_id = data.get("id")
        data = data["meals"]

    try:
        shopping = build_shopping_list(
            data,
            catalog_recipes=_recipe_map(args.catalog),
            user_recipes=_recipe_map(args.user_recipes),
            meal_plan_id=meal_plan_id,
        )
    except (InvalidMealPlanError, EmptyShoppingListError) as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    _print_list(config, shopping, args.json)


def _cmd_show(config, args) -> None:
    shopping = ShoppingList.from_dict(_read_json(args.list_file))

    if args.toggle is not None:
        try:
            item = shopping.toggle_item(args.toggle, not args.uncheck)
        except ItemIndexError as e:
            print(str(e), file=sys.stderr)
            sys.exit(1)
        Path(args.list_file).write_text(
            json.dumps(shopping.to_dict(), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        if not args.json:
            state = "coché" if item.checked else "décoché"
            print(f"✓ {item.name} {state}")
            print()

    _print_list(config, shopping, args.json)


def _print_list(config, shopping: ShoppingList, as_json: bool) -> None:
    if as_json:
        print(json.dumps(shopping.to_dict(), ensure_ascii=False, indent=2))
        return
    print(
        shopping.display(
            currency=config.display.currency,
            aisle_labels=config.display.aisle_labels,
            show_checked=config.display.show_checked,
        )
    )
