"""Cookbook runner module.

Run cookbook recipes from a dev install, supporting path-like specs
relative to the cookbook folder.

Requires ``pip install -e .`` so that ``import trypy`` resolves.

Examples:
- python -m cookbook --list
- python -m cookbook getting-started/divide-user-input --dividend 100 --divisor 5
- python -m cookbook production.batch_division
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
import runpy
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


COOKBOOK_DIRNAME = "cookbook"
EXCLUDE_DIRS = {"utils", "__pycache__"}

START_HERE_DISPLAY = "getting-started/divide-user-input.py"


@dataclass(frozen=True)
class RecipeSpec:
    """A resolved recipe specification.

    Attributes:
        path: Absolute path to the recipe Python file.
        display: Human-readable identifier shown to the user.
    """

    path: Path
    display: str


def cookbook_root() -> Path:
    """Return the absolute path to the cookbook directory."""
    return Path(__file__).resolve().parent


def is_recipe_file(path: Path) -> bool:
    name = path.name
    return name.endswith(".py") and name not in {"__init__.py", "__main__.py"}


def list_recipes() -> list[RecipeSpec]:
    """Discover recipe files under the cookbook directory, skipping helpers."""
    root = cookbook_root()
    results: list[RecipeSpec] = []
    for path in root.rglob("*.py"):
        rel = path.relative_to(root)
        if any(part in EXCLUDE_DIRS for part in rel.parts):
            continue
        if not is_recipe_file(path):
            continue
        results.append(RecipeSpec(path=path, display=rel.as_posix()))
    results.sort(key=lambda s: s.display)
    return results


def dotted_to_path(spec: str) -> str:
    """Convert a dotted-like spec to a cookbook-relative path.

    'production.batch_division' becomes 'production/batch-division.py'.
    """
    candidate = spec.replace(".", "/").replace("_", "-")
    if not candidate.endswith(".py"):
        candidate += ".py"
    return candidate


def resolve_spec(spec: str) -> RecipeSpec:
    """Resolve a user-provided spec into a recipe under the cookbook folder.

    Accepts 'cookbook/<path>', '<path>' (with or without '.py'), or a
    dotted-like spec.
    """
    croot = cookbook_root()
    rel = spec
    if rel.startswith((COOKBOOK_DIRNAME + "/", COOKBOOK_DIRNAME + "\\")):
        rel = rel[len(COOKBOOK_DIRNAME) + 1 :]

    candidates = [rel if rel.endswith(".py") else rel + ".py", dotted_to_path(rel)]
    tried: list[Path] = []
    for candidate in candidates:
        path = (croot / candidate).resolve()
        tried.append(path)
        if (
            path.is_file()
            and path.is_relative_to(croot)
            and is_recipe_file(path)
            and not any(part in EXCLUDE_DIRS for part in path.relative_to(croot).parts)
        ):
            return RecipeSpec(path=path, display=path.relative_to(croot).as_posix())

    raise FileNotFoundError(
        "Recipe not found. Tried: "
        + ", ".join(str(p) for p in tried)
        + ". Use --list to view available recipes."
    )


def _extract_description(recipe: RecipeSpec) -> str:
    """Return the text after 'Recipe:' in the module docstring, if any."""
    try:
        first_lines = recipe.path.read_text(encoding="utf-8").split("\n", 10)
    except OSError:
        return ""
    for line in first_lines:
        stripped = line.strip().strip('"').strip("'")
        if stripped.startswith("Recipe:"):
            return stripped[len("Recipe:") :].strip().rstrip(".")
    return ""


def print_recipe_list(recipes: Iterable[RecipeSpec]) -> None:
    """Print available recipes grouped by category with descriptions."""
    grouped: dict[str, list[RecipeSpec]] = {}
    for r in recipes:
        parts = r.display.split("/")
        category = parts[0] if len(parts) > 1 else ""
        grouped.setdefault(category, []).append(r)

    for category, specs in grouped.items():
        heading = category.replace("-", " ").title() if category else "Recipes"
        print(f"\n  {heading}")
        for spec in specs:
            name = spec.display.removesuffix(".py")
            desc = _extract_description(spec)
            marker = "  <- start here" if spec.display == START_HERE_DISPLAY else ""
            print(f"    {name:<40s} {desc}{marker}".rstrip())

    print("\n  Run:   python -m cookbook <recipe> [recipe args]\n")


def parse_args(argv: Sequence[str]) -> tuple[argparse.Namespace, list[str]]:
    """Parse runner arguments, passing unknown flags through to the recipe.

    If ``--`` is present, everything after it goes to the recipe verbatim.
    """
    parser = argparse.ArgumentParser(
        prog="python -m cookbook",
        description="trypy cookbook: small programs built from Result chains.",
        add_help=False,
    )
    parser.add_argument("spec", nargs="?", help="Recipe to run")
    parser.add_argument("--list", action="store_true", help="List recipes and exit")

    if "--" in argv:
        idx = list(argv).index("--")
        ns, extra = parser.parse_known_args(list(argv[:idx]))
        return ns, [*extra, *argv[idx + 1 :]]
    return parser.parse_known_args(list(argv))


def run_recipe(recipe: RecipeSpec, passthrough: Sequence[str]) -> int:
    """Execute the recipe in-process using runpy.

    Sets sys.argv to mimic direct script execution and returns the
    recipe's exit status (0 unless it raised SystemExit with a code).
    """
    try:
        import trypy as _trypy  # noqa: F401
    except ImportError:
        print(
            "Error: could not import trypy. Run 'pip install -e .' first.",
            file=sys.stderr,
        )
        return 1

    prev_argv = list(sys.argv)
    sys.argv = [str(recipe.path), *passthrough]
    try:
        runpy.run_path(str(recipe.path), run_name="__main__")
    except SystemExit as exc:
        if exc.code is None or isinstance(exc.code, int):
            return exc.code or 0
        print(exc.code, file=sys.stderr)
        return 1
    finally:
        sys.argv = prev_argv
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    raw = list(argv) if argv is not None else sys.argv[1:]
    args, passthrough = parse_args(raw)

    if args.list or not args.spec:
        print_recipe_list(list_recipes())
        return 0

    try:
        spec = resolve_spec(args.spec)
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    return run_recipe(spec, passthrough)


if __name__ == "__main__":  # pragma: no cover - direct execution guard
    raise SystemExit(main())
