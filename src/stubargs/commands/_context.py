"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Builds the generator and signature registry lazily
from settings and plugins, and owns result emission (stdout/stderr
routing plus exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from stubargs.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from pathlib import Path

    from stubargs.config.settings import StubArgsSettings
    from stubargs.infrastructure.signatures import SignatureRegistry
    from stubargs.plugins.manager import PluginManager
    from stubargs.services.generator import StubValueGenerator
    from stubargs.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: StubArgsSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None
        self._generator: StubValueGenerator | None = None
        self.warnings: list[str] = []

        from stubargs.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        self.log = structlog.get_logger("stubargs.cli")

    @property
    def plugins(self) -> PluginManager | None:
        """Entry-point plugins, or None when ``[plugins] enabled = false``."""
        if not self.settings.plugins.enabled:
            return None
        if self._plugins is None:
            from stubargs.plugins.manager import PluginManager

            self._plugins = PluginManager()
            names = self._plugins.discover_and_load()
            self.log.debug("plugins.loaded", plugins=names)
        return self._plugins

    @property
    def generator(self) -> StubValueGenerator:
        """Generator with configured and plugin rules merged into the defaults."""
        if self._generator is None:
            from stubargs.services.generator import build_generator

            cfg = self.settings.generator
            extra = list(cfg.rules)
            if self.plugins is not None:
                extra.extend(self.plugins.collect_rules(self.warnings))
            self._generator = build_generator(
                extra, use_defaults=cfg.use_defaults, fallback=cfg.fallback
            )
            self.log.debug("generator.ready", rules=len(self._generator.rules))
        return self._generator

    def signature_registry(self, extra_path: Path | None = None) -> SignatureRegistry:
        """Signatures from the config file, plus *extra_path* if given."""
        from stubargs.infrastructure.signatures import SignatureError, SignatureRegistry

        try:
            registry = SignatureRegistry.from_mapping(self.settings.signatures)
            if extra_path is not None:
                registry.merge(SignatureRegistry.from_toml(extra_path))
        except SignatureError as exc:
            raise click.ClickException(str(exc)) from exc
        return registry

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings go to stderr unless in JSON mode.
        * Failure: stderr, exit code 1.
        """
        if self.warnings:
            result = result.model_copy(update={"warnings": [*self.warnings, *result.warnings]})
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        self.log.debug("result.emit", op=result.op, ok=result.ok)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
