import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..chunking.engine import ProcessingEngine
from ..chunking.hasher import compute_chunk_id
from ..core.artifacts import (
    dump_chunks_ndjson,
    read_chunks_ndjson,
    read_result,
    write_result,
)
from ..core.config import Settings
from ..core.errors import EngineError, IntegrityFailure
from ..core.logging import log, setup_logging

app = typer.Typer(add_completion=False, help="OxShare content-addressed chunking CLI")


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else Settings.load_config()


@app.callback()
def _init(
    ctx: typer.Context,
    config_file: Optional[str] = typer.Option(
        None,
        "--config",
        help="Config file (.oxshare.yaml auto-discovered)",
    ),
) -> None:
    settings = Settings.load_config(config_file)
    ctx.obj = settings
    setup_logging(settings.LOG_FORMAT, settings.LOG_LEVEL)


@app.command()
def version() -> None:
    from .. import __version__

    typer.echo(__version__)


@app.command()
def config(ctx: typer.Context) -> None:
    """Print effective settings as KEY=value lines."""
    for k, v in _settings(ctx).model_dump().items():
        typer.echo(f"{k}={v}")


@app.command("hash")
def hash_cmd(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="File to hash"),
) -> None:
    """Print the content address (SHA-256 hex) of a file."""
    typer.echo(compute_chunk_id(file.read_bytes()))


@app.command()
def verify(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="File to check"),
    chunk_id: str = typer.Argument(..., help="Expected content address"),
) -> None:
    """Exit 0 if FILE hashes to CHUNK_ID, 1 otherwise."""
    actual = compute_chunk_id(file.read_bytes())
    if actual != chunk_id.strip().lower():
        typer.echo(f"❌ Mismatch: expected {chunk_id}, got {actual}", err=True)
        raise typer.Exit(1)
    typer.echo(f"✅ {file} matches {actual.short()}", err=True)


@app.command()
def process(
    ctx: typer.Context,
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="File to chunk"),
    out: Path = typer.Option(..., "--out", "-o", help="Manifest path (.json result or .ndjson chunk stream)"),
    chunk_size: Optional[int] = typer.Option(None, "--chunk-size", min=1, help="Chunk size in bytes"),
) -> None:
    """
    Split a file into content-addressed chunks and write them to a manifest.

    A .json manifest holds the full result (chunks, total size, root hash).
    A .ndjson manifest holds one chunk per line and no root hash.

    Example:
        oxshare process big.bin --out big.json
        oxshare process big.bin --out big.ndjson --chunk-size 65536
    """
    settings = _settings(ctx)
    engine = ProcessingEngine(chunk_size or settings.OXSHARE_CHUNK_SIZE)

    try:
        result = engine.process(file.read_bytes())
    except EngineError as e:
        typer.echo(f"❌ Processing failed: {e}", err=True)
        raise typer.Exit(1) from e

    if out.suffix == ".ndjson":
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(dump_chunks_ndjson(result.chunks), encoding="utf-8")
    else:
        write_result(result, out)

    log.info(
        "process.complete",
        source=str(file),
        chunk_size=engine.chunk_size,
        chunks=result.chunk_count,
        total_size=result.total_size,
        root_hash=result.root_hash.short(),
    )
    typer.echo(f"✅ {result.chunk_count} chunks, {result.total_size} bytes", err=True)
    typer.echo(f"📁 Manifest written to: {out}", err=True)
    typer.echo(result.root_hash)


@app.command()
def reconstruct(
    ctx: typer.Context,
    manifest: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Manifest from 'oxshare process'"),
    out: Path = typer.Option(..., "--out", "-o", help="Where to write the reconstructed bytes"),
    check_root: bool = typer.Option(True, "--check-root/--no-check-root", help="Compare output against the manifest root hash"),
) -> None:
    """
    Verify every chunk in a manifest and write the reassembled bytes.

    Nothing is written if any chunk (or the root hash) fails verification.
    """
    settings = _settings(ctx)
    engine = ProcessingEngine(settings.OXSHARE_CHUNK_SIZE)

    try:
        if manifest.suffix == ".ndjson":
            chunks = read_chunks_ndjson(manifest)
            root_hash = None
        else:
            result = read_result(manifest)
            chunks = list(result.chunks)
            root_hash = result.root_hash

        data = engine.reconstruct(chunks)

        if check_root:
            if root_hash is None:
                log.warning("reconstruct.root_check_skipped", manifest=str(manifest))
            else:
                actual = compute_chunk_id(data)
                if actual != root_hash:
                    raise IntegrityFailure(expected=root_hash, actual=actual)
    except EngineError as e:
        log.error("reconstruct.failed", manifest=str(manifest), error=str(e))
        typer.echo(f"❌ Reconstruction failed: {e}", err=True)
        raise typer.Exit(1) from e

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(data)

    log.info("reconstruct.complete", manifest=str(manifest), chunks=len(chunks), bytes=len(data))
    typer.echo(f"✅ Reconstructed {len(data)} bytes from {len(chunks)} chunks", err=True)
    typer.echo(f"📁 Written to: {out}", err=True)


@app.command()
def inspect(
    ctx: typer.Context,
    manifest: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Manifest from 'oxshare process'"),
) -> None:
    """Show the chunks recorded in a .json manifest."""
    settings = _settings(ctx)

    try:
        result = read_result(manifest)
    except EngineError as e:
        typer.echo(f"❌ Cannot read manifest: {e}", err=True)
        raise typer.Exit(1) from e

    console = Console(
        file=sys.stdout,
        color_system=None if settings.NO_COLOR else "auto",
    )

    table = Table(title=manifest.name)
    table.add_column("#", justify="right")
    table.add_column("Offset", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("Chunk ID")

    for i, chunk in enumerate(result.chunks):
        table.add_row(str(i), str(chunk.offset), str(chunk.size()), chunk.id.short())

    console.print(table)

    ratio = result.dedup_ratio
    console.print(f"Chunks: {result.chunk_count}")
    console.print(f"Total size: {result.total_size}")
    console.print(f"Root hash: {result.root_hash}")
    console.print(f"Dedup ratio: {'none' if ratio is None else f'{ratio:.2%}'}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
