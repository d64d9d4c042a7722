"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Builds the collection lazily and centralizes result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from notekit.config.logging import configure_logging
from notekit.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from notekit.config.settings import NotekitSettings
    from notekit.domain.collection import NoteCollection
    from notekit.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The collection is built on first use so ``--help`` and ``--version``
    never load plugins.
    """

    def __init__(self, settings: NotekitSettings, *, load_plugins: bool = True) -> None:
        self.settings = settings
        self.load_plugins = load_plugins
        self._collection: NoteCollection | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def collection(self) -> NoteCollection:
        """The configured collection, with plugin field types installed."""
        if self._collection is None:
            from notekit.domain.catalog import TypeCatalog
            from notekit.domain.collection import NoteCollection

            catalog = TypeCatalog()
            if self.load_plugins:
                from notekit.plugins.manager import PluginManager

                manager = PluginManager()
                names = manager.discover_and_load(disabled=self.settings.plugins.disabled)
                installed = manager.install_field_types(catalog)
                logger.debug("Plugins loaded: %s; field types added: %s", names, installed)
            self._collection = NoteCollection.from_config(self.settings.collection, catalog=catalog)
        return self._collection

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout and returns. Warnings go to stderr so
          they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON output already carries the warnings.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
