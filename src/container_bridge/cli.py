"""Command-line interface for the container bridge."""

import sys
import click
from pathlib import Path
from .codec import CodecConfig, NumeralBase, create_context
from .error_handler import ErrorHandler
from .types import CodecError, ContainerKind

KIND_NAMES = [kind.value for kind in ContainerKind]


def _report(error_handler: ErrorHandler, error: CodecError) -> None:
    response = error_handler.handle_codec_error(error)
    click.echo(f"❌ Error: {error}")
    click.echo(f"💡 {response.suggested_action}")
    sys.exit(1)


@click.group()
@click.version_option(version="1.0.0")
def main():
    """Container Bridge - Convert and serialize containers across families."""
    pass


@main.command()
@click.option('--long', '-l', 'long_tags', is_flag=True, help='Show full kind names as tags')
def kinds(long_tags: bool):
    """List the registered container kinds and their type tags."""
    context = create_context(CodecConfig(add_class_tags=not long_tags))
    for kind in context.registered_kinds():
        handler = context.handler_for(kind)
        click.echo(f"{kind.value:<28} {context.tag_for(handler)}")


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--kind', '-k', required=True, type=click.Choice(KIND_NAMES), help='Kind of the serialized container')
@click.option('--from-base', default=10, help='Numeral base of the input (default: 10)')
@click.option('--to-base', default=10, help='Numeral base of the output (default: 10)')
@click.option('--output', '-o', help='Output JSON file path')
def recode(input_file: Path, kind: str, from_base: int, to_base: int, output: str):
    """Re-encode a serialized container from one numeral base to another."""
    error_handler = ErrorHandler()
    for radix in (from_base, to_base):
        validation = error_handler.validate_numeral_base(radix)
        if not validation.is_valid:
            for error in validation.errors:
                click.echo(f"❌ Error: {error.message}")
            sys.exit(1)

    container_kind = ContainerKind(kind)
    reader = create_context(CodecConfig(numeral_base=NumeralBase(from_base))).freeze()
    writer = reader.with_config(CodecConfig(numeral_base=NumeralBase(to_base))).freeze()

    try:
        container = reader.from_json(input_file.read_text(encoding='utf-8'), container_kind)
        json_string = writer.to_json(container, container_kind)
    except CodecError as e:
        _report(error_handler, e)
        return

    if output:
        output_path = Path(output)
        output_path.write_text(json_string, encoding='utf-8')
        click.echo(f"✅ Successfully wrote {kind} in base {to_base} to {output_path}")
    else:
        click.echo(json_string)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--kind', '-k', required=True, type=click.Choice(KIND_NAMES), help='Kind of the serialized container')
@click.option('--base', '-b', default=10, help='Numeral base of the input (default: 10)')
def check(input_file: Path, kind: str, base: int):
    """Check that a JSON document reads as the given container kind."""
    error_handler = ErrorHandler()
    validation = error_handler.validate_numeral_base(base)
    if not validation.is_valid:
        click.echo(f"❌ Error: {validation.errors[0].message}")
        sys.exit(1)

    context = create_context(CodecConfig(numeral_base=NumeralBase(base)))
    try:
        container = context.from_json(input_file.read_text(encoding='utf-8'), ContainerKind(kind))
    except CodecError as e:
        _report(error_handler, e)
        return

    if container is None:
        click.echo(f"✅ Valid {kind} (null)")
    else:
        click.echo(f"✅ Valid {kind} with {len(container)} elements")


if __name__ == '__main__':
    main()
