"""CLI entry point for the parallax video generator."""

import json
import logging
import typer
from pathlib import Path
from typing import Optional

from . import __version__
from .config import config
from .models import DocumentError, EditorState, SceneDocument

app = typer.Typer(
    name="pvg",
    help="Parallax scene editor and frame evaluator",
    no_args_is_help=True
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pvg version {__version__}")
        raise typer.Exit()


def load_document(path: Path) -> SceneDocument:
    """Load a document or exit with an error message."""
    if not path.exists():
        typer.echo(f"❌ No document found at {path}")
        typer.echo("   Run 'pvg new' to create one")
        raise typer.Exit(1)

    try:
        return SceneDocument.from_file(path)
    except (DocumentError, OSError) as e:
        typer.echo(f"❌ Error loading document: {e}")
        raise typer.Exit(1)


def check_config() -> None:
    """Validate the configuration or exit with an error message."""
    try:
        config.validate_required()
    except ValueError as e:
        typer.echo(f"❌ Configuration error: {e}")
        raise typer.Exit(1)


def save_document(document: SceneDocument, path: Path) -> None:
    """Save a document or exit with an error message."""
    check_config()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        document.to_file(path, indent=config.json_indent)
    except OSError as e:
        typer.echo(f"❌ Error saving document: {e}")
        raise typer.Exit(1)


def document_option():
    return typer.Option(
        config.document_path,
        "--document",
        "-d",
        help="Path to the scene document (JSON or YAML)",
        file_okay=True,
        dir_okay=False
    )


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
) -> None:
    """Parallax Video Generator - compose camera and layers, evaluate frames."""
    pass


@app.command()
def new(
    output: Path = document_option(),
    name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help="Composition name"
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing document"
    ),
) -> None:
    """Create a default scene document."""
    from .editor import GlobalSettingsPatch, Session, UpdateGlobalSettings

    if output.exists() and not force:
        typer.echo(f"❌ {output} already exists (use --force to overwrite)")
        raise typer.Exit(1)

    session = Session()
    if name:
        session.dispatch(UpdateGlobalSettings(patch=GlobalSettingsPatch(composition_name=name)))

    save_document(session.document, output)
    document = session.document
    typer.echo(f"✅ Document saved: {output}")
    typer.echo(f"   {document.width}x{document.height} @ {document.fps}fps, "
               f"{document.duration_in_frames} frames")


@app.command()
def status(
    document_path: Path = document_option(),
) -> None:
    """Show a summary of a scene document."""
    document = load_document(document_path)

    typer.echo(f"📁 Composition: {document.composition_name}")
    typer.echo(f"   Canvas: {document.width}x{document.height}")
    typer.echo(f"   Background: {document.background_color}")
    seconds = document.duration_in_frames / document.fps if document.fps > 0 else 0.0
    typer.echo(f"   Duration: {document.duration_in_frames} frames ({seconds:.1f}s @ {document.fps}fps)")

    camera = document.camera
    typer.echo(f"   Camera: ({camera.initial_x}, {camera.initial_y}) x{camera.initial_zoom}"
               f" → ({camera.final_x}, {camera.final_y}) x{camera.final_zoom}")

    typer.echo(f"\n🗂️  Layers: {len(document.layers)}")
    for layer in sorted(document.layers, key=lambda l: l.z_index):
        icon = "👁️ " if layer.is_visible else "🚫"
        factor = layer.parallax_factor
        typer.echo(f"   {icon} [{layer.z_index}] {layer.name} "
                   f"(parallax {factor.x}, {factor.y}): {len(layer.elements)} element(s)")
        for element in sorted(layer.elements, key=lambda el: el.z_index):
            typer.echo(f"      • {element.name} at ({element.x}, {element.y}) "
                       f"{element.width}x{element.height}")


@app.command("add-svg")
def add_svg(
    svg: Path = typer.Argument(
        ...,
        help="SVG file to add",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    document_path: Path = document_option(),
    layer_id: Optional[str] = typer.Option(
        None,
        "--layer",
        "-l",
        help="Layer id to add to (defaults to the top layer, created if there is none)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Add an SVG image as a new element."""
    from .assets import AssetError, load_svg
    from .editor import AddElementToLayer, AddLayer, Session

    setup_logging(verbose)
    document = load_document(document_path)

    try:
        element = load_svg(svg)
    except AssetError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(1)

    session = Session(EditorState.from_document(document))
    if layer_id is None:
        if document.layers:
            layer_id = max(document.layers, key=lambda l: l.z_index).id
        else:
            layer_id = session.dispatch(AddLayer()).selected_layer_id
            typer.echo(f"   Created layer {layer_id}")
    elif document.find_layer(layer_id) is None:
        typer.echo(f"❌ Layer not found: {layer_id}")
        raise typer.Exit(1)

    state = session.dispatch(AddElementToLayer(layer_id=layer_id, element=element))
    save_document(session.document, document_path)
    typer.echo(f"✅ Added {element.name} ({element.width}x{element.height}) "
               f"as {state.selected_element_id}")


@app.command()
def apply(
    script: Path = typer.Argument(
        ...,
        help="JSON or YAML list of editor commands",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    document_path: Path = document_option(),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Where to write the result (defaults to the input document)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Apply a script of editor commands to a document."""
    from .editor import CommandScriptError, Session, load_commands

    setup_logging(verbose)
    document = load_document(document_path)

    try:
        commands = load_commands(script)
    except (CommandScriptError, OSError) as e:
        typer.echo(f"❌ Error loading commands: {e}")
        raise typer.Exit(1)

    session = Session(EditorState.from_document(document))
    state = session.dispatch_all(commands)

    destination = output or document_path
    save_document(session.document, destination)
    typer.echo(f"✅ Applied {session.applied} command(s) → {destination}")
    typer.echo(f"   Layers: {len(state.layers)}")
    if state.selected_layer_id:
        typer.echo(f"   Selected layer: {state.selected_layer_id}")
    if state.selected_element_id:
        typer.echo(f"   Selected element: {state.selected_element_id}")


@app.command()
def frame(
    index: int = typer.Argument(
        0,
        help="Frame index to evaluate"
    ),
    document_path: Path = document_option(),
    indent: Optional[int] = typer.Option(
        None,
        "--indent",
        "-i",
        help="JSON indent (defaults to PVG_JSON_INDENT)"
    ),
) -> None:
    """Evaluate one frame and print the camera pose and draw list as JSON."""
    from .render import evaluate

    if indent is None:
        check_config()
    document = load_document(document_path)
    if not 0 <= index < max(document.duration_in_frames, 1):
        typer.echo(f"❌ Frame {index} is outside 0..{document.duration_in_frames - 1}")
        raise typer.Exit(1)

    result = evaluate(document, index)
    typer.echo(json.dumps(result.to_dict(), indent=config.json_indent if indent is None else indent))


if __name__ == "__main__":
    app()
