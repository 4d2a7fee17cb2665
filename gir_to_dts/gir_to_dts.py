import json
import sys
from pathlib import Path

import click

from .discovery import GirFile, iter_gir_files, module_name, read_text, resolve_output_dir, write_text
from .logging import configure_logging, get_logger
from .pipeline import GeneratorConfig, StructuralError, compile_gir

logger = get_logger("cli")


def _explicit_files(paths):
    for path in paths:
        name = module_name(path) or Path(path).stem
        yield GirFile(name=name, path=Path(path))


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option(
    "--output-dir",
    "-o",
    default=None,
    type=click.Path(file_okay=False, resolve_path=True),
    help="Directory for generated .d.ts files (default: $GIR_TYPEDEF_DIR/types)",
)
@click.option("--no-documentation", is_flag=True, default=False, help="Emit bare signatures without doc comments")
@click.option("--camel-case", is_flag=True, default=False, help="Convert snake_case method names to camelCase")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("paths", nargs=-1, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
def gir_to_dts(config, output_dir, no_documentation, camel_case, verbose, paths):
    """Generate TypeScript declarations from GIR files.

    Without PATHS, every GIR file under the standard gir-1.0 directories is
    compiled.
    """
    configure_logging(verbose=verbose)

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    # CLI flags override the config file
    if no_documentation:
        config.documentation = False
    if camel_case:
        config.camel_case_methods = True

    output_dir = Path(output_dir) if output_dir is not None else resolve_output_dir()
    gir_files = _explicit_files(paths) if paths else iter_gir_files()

    failures = 0
    for gir_file in gir_files:
        logger.info("Parsing %s...", gir_file.path)
        try:
            result = compile_gir(read_text(gir_file.path), config)
            write_text(output_dir / f"{gir_file.name}.d.ts", result.text)
        except (StructuralError, UnicodeDecodeError, OSError) as e:
            failures += 1
            logger.error("Failed to generate %s: %s", gir_file.path, e)
            continue
        if result.stalled:
            logger.warning("%s: unordered classes: %s", gir_file.name, ", ".join(result.stalled))

    if failures:
        sys.exit(1)
