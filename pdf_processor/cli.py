"""
Command-line interface for the PDF processor.
"""

import os
import sys

import click
from rich.console import Console
from rich.progress import Progress, TextColumn, BarColumn, TimeRemainingColumn, TaskProgressColumn
from rich.table import Table

from pdf_processor import __version__
from pdf_processor.bundle import unique_entries, write_pages, write_zip
from pdf_processor.config import get_default_config
from pdf_processor.exceptions import PDFProcessorError
from pdf_processor.processor import PDFProcessor
from pdf_processor.types import SPLITTING
from pdf_processor.utils import configure_logging, format_file_size, read_pdf_bytes

console = Console()


def _fail(error):
    console.print(f"\n[bold red]✗ Error:[/bold red] {error}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """
    PDF Processor - Split PDFs into one named file per recipient page.
    """
    if verbose:
        configure_logging(verbose=True)


@cli.command(name="split")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--output', '-o',
    default=None,
    help='Path of the ZIP archive to create',
    type=click.Path(dir_okay=False)
)
@click.option(
    '--out-dir', '-d',
    default=None,
    help='Write the single pages into this directory instead of a ZIP',
    type=click.Path(file_okay=False)
)
@click.option(
    '--password', '-p',
    default=None,
    help='Password for protected PDFs',
    type=str
)
def split(input_pdf, output, out_dir, password):
    """
    Split a PDF into one file per page, named after each page's recipient.

    Examples:

        pdf-processor split lohnabrechnungen.pdf

        pdf-processor split lohnabrechnungen.pdf -o januar.zip

        pdf-processor split geschuetzt.pdf --password geheim -d seiten/
    """
    config = get_default_config()
    try:
        data = read_pdf_bytes(input_pdf, config.max_file_size_bytes)
        processor = PDFProcessor(config=config)

        if not password and processor.needs_password(data):
            password = click.prompt("PDF is password protected. Password", hide_input=True)

        total = processor.page_count(data, password)
        console.print(
            f"\n[bold cyan]Processing {total} pages of {os.path.basename(input_pdf)} "
            f"({format_file_size(len(data))})...[/bold cyan]"
        )

        with Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TimeRemainingColumn(),
            console=console
        ) as progress:
            split_task = progress.add_task("Splitting pages", total=total)
            name_task = progress.add_task("Reading recipients", total=total)

            def update_progress(event):
                task = split_task if event.phase == SPLITTING else name_task
                progress.update(task, completed=event.current, total=event.total)

            pages = processor.process(data, password=password, on_progress=update_progress)

        if out_dir:
            created = [path.name for path in write_pages(pages, out_dir)]
            target = os.path.abspath(out_dir)
        else:
            destination = output or os.path.join(os.path.dirname(os.path.abspath(input_pdf)), config.zip_name)
            archive = write_zip(pages, destination)
            created = [name for name, _ in unique_entries(pages)]
            target = str(archive)

        console.print(f"\n[bold green]✓ Successfully split into {len(pages)} files[/bold green]")
        console.print(f"[dim]Output: {target}[/dim]")

        table = Table(title="Created files", show_header=True)
        table.add_column("Page", style="cyan", width=6)
        table.add_column("Filename", style="green")
        for page, name in zip(pages, created):
            table.add_row(str(page.page_index + 1), name)
        console.print(table)
        console.print()

    except PDFProcessorError as e:
        _fail(e)
    except OSError as e:
        _fail(e)


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option('--password', '-p', default=None, help='Password for protected PDFs', type=str)
def show_info(input_pdf, password):
    """
    Display information about a PDF file.

    Example:

        pdf-processor info lohnabrechnungen.pdf
    """
    config = get_default_config()
    try:
        data = read_pdf_bytes(input_pdf, config.max_file_size_bytes)
        info = PDFProcessor(config=config).info(data, password=password)

        table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
        table.add_column("Property", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")

        table.add_row("File Path", os.path.abspath(input_pdf))
        table.add_row("File Size", format_file_size(info.file_size))
        table.add_row("Number of Pages", "unknown (password required)" if info.num_pages is None else str(info.num_pages))
        table.add_row("Encrypted", "Yes" if info.is_encrypted else "No")
        table.add_row("Password Required", "Yes" if info.needs_password else "No")

        console.print()
        console.print(table)
        console.print()

    except PDFProcessorError as e:
        _fail(e)


@cli.command(name="check-password")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
def check_password(input_pdf):
    """
    Report whether a PDF needs a password before it can be split.

    Example:

        pdf-processor check-password lohnabrechnungen.pdf
    """
    config = get_default_config()
    try:
        data = read_pdf_bytes(input_pdf, config.max_file_size_bytes)
        if PDFProcessor(config=config).needs_password(data):
            console.print("[bold yellow]Password required[/bold yellow]")
        else:
            console.print("[bold green]No password required[/bold green]")
    except PDFProcessorError as e:
        _fail(e)


if __name__ == '__main__':
    cli()
