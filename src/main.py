#!/usr/bin/env python3
"""Command-line entry point for atelier.

Usage:
    # Generate a staging image and a white-background shot
    python src/main.py generate photo1.jpg photo2.jpg --asset STAGING --asset WHITE_BG \\
        --type Necklace --details details.json --output-dir out/

    # Inspect or reset prompt templates
    python src/main.py templates list
    python src/main.py templates show STAGING
    python src/main.py templates reset

    # Detect the jewelry type of a photo
    python src/main.py detect photo.jpg
"""

import argparse
import asyncio
import json
import logging
import mimetypes
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from rich.console import Console
from rich.table import Table

from models.assets import AssetType, BatchResult, GeneratedAsset, InputImage
from models.jewelry import ProductDetails
from services.asset_orchestrator import AssetOrchestrator
from services.brand_settings import BrandSettingsStore
from services.generation_service import GenerationService, GenerationServiceError
from services.prompts import TemplateKey
from services.template_store import JsonFileTemplateStorage, TemplateNotFoundError, TemplateStore
from utils.config import load_config, setup_logging

logger = logging.getLogger(__name__)

console = Console()


def build_services(config: dict) -> tuple[GenerationService, TemplateStore, BrandSettingsStore]:
    """Create the services the commands share."""
    generation_service = GenerationService(
        api_key=config.get("gemini_api_key") or "",
        image_model=config["gemini_image_model"],
        text_model=config["gemini_text_model"],
    )
    template_store = TemplateStore(JsonFileTemplateStorage(config["templates_file"])).load()
    brand_store = BrandSettingsStore(
        settings_file=config["brand_settings_file"],
        default_logo=config.get("default_logo"),
    )
    return generation_service, template_store, brand_store


def load_details(details_file: str | None, jewelry_type: str | None, name: str | None) -> ProductDetails:
    """Read product details from a JSON file, starting from the studio defaults."""
    data: dict = {}
    if details_file:
        data = json.loads(Path(details_file).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{details_file} must contain a JSON object")

    defaults = ProductDetails.studio_defaults().to_dict()
    defaults.update({k: v for k, v in data.items() if v is not None})
    if jewelry_type:
        defaults["type"] = jewelry_type
    if name:
        defaults["name"] = name
    return ProductDetails.from_dict(defaults)


def write_asset(asset: GeneratedAsset, output_dir: Path) -> Path:
    """Write one asset: images decoded to files, text to Markdown."""
    stem = asset.type.name.lower()
    if asset.is_image:
        image = InputImage.from_data_url(asset.content)
        extension = mimetypes.guess_extension(image.mime_type) or ".png"
        path = output_dir / f"{stem}{extension}"
        path.write_bytes(image.data)
    else:
        path = output_dir / f"{stem}.md"
        path.write_text(asset.content + "\n", encoding="utf-8")
    return path


def show_result(result: BatchResult, written: dict[AssetType, Path]) -> None:
    """Print a summary table of the batch."""
    table = Table(title="Generated Assets")
    table.add_column("Asset", style="cyan")
    table.add_column("Status")
    table.add_column("Output / Error")

    for asset in result.succeeded:
        table.add_row(asset.type.value, "[green]✓ Done[/green]", str(written[asset.type]))
    for failure in result.failed:
        table.add_row(failure.asset_type.value, "[red]✗ Failed[/red]", failure.message)

    console.print(table)
    if result.error_notice:
        console.print(f"[yellow]⚠ {result.error_notice}[/yellow]")


async def run_generate(args: argparse.Namespace, config: dict) -> int:
    generation_service, template_store, brand_store = build_services(config)
    orchestrator = AssetOrchestrator(
        generation_service,
        template_store,
        max_concurrent=config["max_concurrent_generations"],
    )

    images = [InputImage.from_path(path) for path in args.images]
    selected = [AssetType.parse(a) for a in args.asset] if args.asset else list(AssetType)
    details = brand_store.apply_defaults(load_details(args.details, args.type, args.name))
    logo = InputImage.from_path(args.logo) if args.logo else await brand_store.get_effective_logo()

    console.print(
        f"\n[bold blue]Generating {len(selected)} asset(s) for {details.type.value}"
        f"{' ' + repr(details.name) if details.name else ''}[/bold blue]"
    )
    with console.status("Waiting for Gemini..."):
        result = await orchestrator.generate_batch(images, selected, details, logo=logo)

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written = {asset.type: write_asset(asset, output_dir) for asset in result.succeeded}

    show_result(result, written)
    return 0 if result.succeeded else 1


def run_templates(args: argparse.Namespace, config: dict) -> int:
    _, template_store, _ = build_services(config)

    if args.templates_command == "list":
        table = Table(title="Prompt Templates")
        table.add_column("Key", style="cyan")
        table.add_column("Customized")
        table.add_column("Length", justify="right")
        for key, content in template_store.templates.items():
            table.add_row(key.value, "✓" if template_store.is_customized(key) else "", str(len(content)))
        console.print(table)
    elif args.templates_command == "show":
        try:
            console.print(template_store.get(args.key.upper()), markup=False, highlight=False)
        except TemplateNotFoundError:
            console.print(f"[red]Unknown template: {args.key}[/red]")
            console.print(f"[dim]Available: {', '.join(k.value for k in TemplateKey)}[/dim]")
            return 1
    elif args.templates_command == "reset":
        template_store.reset()
        console.print("[green]✓ Templates reset to defaults[/green]")
    return 0


async def run_detect(args: argparse.Namespace, config: dict) -> int:
    generation_service, _, _ = build_services(config)
    detected = await generation_service.detect_jewelry_type(InputImage.from_path(args.image))
    console.print(f"[bold green]{detected.value}[/bold green]")
    return 0


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Generate jewelry marketing assets with Gemini",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python src/main.py generate ring.jpg --asset DESCRIPTION --type Ring
    python src/main.py templates show MODEL_NECKLACE
    python src/main.py detect earrings.jpg
        """,
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser("generate", help="Generate assets from product photos")
    generate.add_argument("images", nargs="+", help="Product photos")
    generate.add_argument(
        "--asset",
        action="append",
        choices=[t.name for t in AssetType],
        help="Asset type to generate (repeatable, default: all)",
    )
    generate.add_argument("--type", help="Jewelry type (Necklace, Earrings, Ring, Bracelet, Other)")
    generate.add_argument("--name", help="Product name")
    generate.add_argument("--details", help="JSON file with product details (camelCase or snake_case keys)")
    generate.add_argument("--logo", help="Logo image for the staging shot (default: brand logo)")
    generate.add_argument("--output-dir", default="output", help="Where to write assets (default: output)")

    templates = subparsers.add_parser("templates", help="Inspect or reset prompt templates")
    templates_sub = templates.add_subparsers(dest="templates_command", required=True)
    templates_sub.add_parser("list", help="List templates")
    show = templates_sub.add_parser("show", help="Print one template")
    show.add_argument("key", help="Template key (e.g. STAGING)")
    templates_sub.add_parser("reset", help="Restore factory defaults")

    detect = subparsers.add_parser("detect", help="Detect the jewelry type of a photo")
    detect.add_argument("image", help="Product photo")

    args = parser.parse_args()
    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = load_config()

    # Setup logging
    setup_logging("DEBUG" if args.verbose else config["log_level"])

    if args.command in ("generate", "detect") and not config.get("gemini_api_key"):
        console.print("[red]Error: GEMINI_API_KEY not configured[/red]")
        console.print("[dim]Set GEMINI_API_KEY in your .env file[/dim]")
        sys.exit(1)

    try:
        if args.command == "generate":
            exit_code = asyncio.run(run_generate(args, config))
        elif args.command == "detect":
            exit_code = asyncio.run(run_detect(args, config))
        else:
            exit_code = run_templates(args, config)
    except (GenerationServiceError, ValueError, OSError) as e:
        console.print(f"[red]Error: {e}[/red]")
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
