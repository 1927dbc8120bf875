"""
Asset converter module.

This module regenerates raster targets from authored source assets. A run is
two sequential sweeps over the source directory:

1. Vector pass: every vector source (SVG) whose raster is missing or older
   than the source is rasterized.
2. Raster pass: the source directory is listed again, together with the
   intermediate directory, so rasters produced by the vector pass are picked
   up, and every raster whose target is missing or older than it is scaled to
   the target width.

In two-stage mode (the default) the vector pass writes a natural-size raster
into the intermediate directory (``<source_dir>/.intermediate``) and the
raster pass produces the final sized copy in the output directory. In
single-stage mode the vector pass renders straight into the output directory
at the target width. Files in the source directory itself are never written.

Any conversion failure aborts the run; targets converted before the failure
are left in place.
"""

import os
from typing import Dict, Any, List, Optional, Sequence

from texsync.converters import create_converter
from texsync.converters.base import ImageConverter
from texsync.core.constants import (
    DEFAULT_TARGET_WIDTH,
    DEFAULT_VECTOR_EXTENSIONS,
    DEFAULT_RASTER_EXTENSIONS,
    DEFAULT_TARGET_EXTENSION,
    DEFAULT_INTERMEDIATE_DIR,
)
from texsync.core.error_handler import ConversionError, ConfigurationError, log_conversion_error
from texsync.core.logging_config import get_logger
from texsync.core.utils import (
    derive_target_path,
    ensure_dir,
    get_mtime_ns,
    is_stale,
    list_source_files,
)
from texsync.sync.sync_report import SyncReport

logger = get_logger(__name__)

VECTOR_STAGE = "vector"
RASTER_STAGE = "raster"

class SourceAsset:
    """
    An input file of one of the two passes.

    ``mtime_ns`` is read once, when the asset is listed; it is None for an
    intermediate that a dry run only planned.
    """

    def __init__(self, path: str, kind: str):
        self.path = path
        self.kind = kind
        self.stem = os.path.splitext(os.path.basename(path))[0]
        self.mtime_ns = get_mtime_ns(path)

    def __repr__(self) -> str:
        return f"SourceAsset({self.path!r}, {self.kind!r})"


class AssetConverter:
    """
    Keeps raster targets in sync with their source assets.
    """

    def __init__(
        self,
        source_dir: str,
        output_dir: Optional[str] = None,
        target_width: int = DEFAULT_TARGET_WIDTH,
        converter: Optional[ImageConverter] = None,
        two_stage: bool = True,
        intermediate_width: Optional[int] = None,
        intermediate_dir: Optional[str] = None,
        vector_extensions: Optional[Sequence[str]] = None,
        raster_extensions: Optional[Sequence[str]] = None,
        target_extension: str = DEFAULT_TARGET_EXTENSION,
        force: bool = False,
        dry_run: bool = False,
        report: Optional[SyncReport] = None
    ):
        """
        Initialize the AssetConverter.

        Args:
            source_dir: Directory holding the authored assets.
            output_dir: Directory for the final targets. Defaults to the
                        parent of source_dir.
            target_width: Width in pixels of the final targets.
            converter: Converter used to rasterize and scale. Defaults to
                       the command-line converter.
            two_stage: Rasterize vectors into the intermediate directory at
                       natural size and let the raster pass scale them.
            intermediate_width: Width of two-stage intermediates; None keeps
                                the natural size.
            intermediate_dir: Directory for two-stage intermediates, relative
                              paths are resolved against source_dir.
                              Defaults to ``<source_dir>/.intermediate``.
            vector_extensions: Extensions treated as vector sources.
            raster_extensions: Extensions treated as raster sources.
            target_extension: Extension of every generated file.
            force: Regenerate targets even when they are fresh.
            dry_run: Log and record planned conversions without running them.
            report: Report to record the run into.

        Raises:
            ConfigurationError: If the directories or sizes are invalid.
        """
        if not os.path.isdir(source_dir):
            raise ConfigurationError(f"Source directory not found: {source_dir}", component="sync")

        self.source_dir = os.path.abspath(source_dir)
        self.output_dir = os.path.abspath(output_dir) if output_dir else os.path.dirname(self.source_dir)
        self.intermediate_dir = os.path.abspath(
            os.path.join(self.source_dir, intermediate_dir or DEFAULT_INTERMEDIATE_DIR)
        )

        if self.output_dir == self.source_dir:
            raise ConfigurationError(
                "Output directory must differ from the source directory",
                component="sync",
                invalid_keys=["sync.output_dir"]
            )

        if self.intermediate_dir in (self.source_dir, self.output_dir):
            raise ConfigurationError(
                "Intermediate directory must differ from the source and output directories",
                component="sync",
                invalid_keys=["sync.intermediate_dir"]
            )

        self.target_width = self._check_width(target_width, "sync.target_width")
        self.intermediate_width = (
            None if intermediate_width is None
            else self._check_width(intermediate_width, "sync.intermediate_width")
        )

        self.vector_extensions = list(vector_extensions or DEFAULT_VECTOR_EXTENSIONS)
        self.raster_extensions = list(raster_extensions or DEFAULT_RASTER_EXTENSIONS)
        self.target_extension = target_extension.lower()
        self.two_stage = two_stage

        if self.two_stage and self.target_extension not in [ext.lower() for ext in self.raster_extensions]:
            # Intermediates would never be picked up by the raster pass
            raise ConfigurationError(
                f"Two-stage mode needs the target extension {self.target_extension} among the raster extensions",
                component="sync",
                invalid_keys=["sync.raster_extensions"]
            )

        self.converter = converter or create_converter("command")
        self.force = force
        self.dry_run = dry_run
        self.report = report or SyncReport()

        # Intermediates a dry run would have produced, fed to the raster pass
        self._planned_rasters = []

        logger.debug(f"Initialized AssetConverter with {self.converter.__class__.__name__}")

    @classmethod
    def from_config(
        cls,
        config: Dict[str, Any],
        source_dir: str,
        converter: Optional[ImageConverter] = None,
        **overrides
    ) -> "AssetConverter":
        """
        Build an AssetConverter from a configuration dictionary.

        Values in the ``sync`` section are used unless an override other
        than None is given. A relative ``output_dir`` from the configuration
        is resolved against the source directory.

        Args:
            config: Merged configuration.
            source_dir: Directory holding the authored assets.
            converter: Converter to use instead of the configured backend.
            **overrides: Constructor arguments taking precedence over the configuration.

        Returns:
            The configured AssetConverter.
        """
        settings = dict(config.get("sync", {}))

        output_dir = settings.pop("output_dir", None)
        if output_dir and not os.path.isabs(output_dir):
            output_dir = os.path.join(source_dir, output_dir)
        settings["output_dir"] = output_dir

        for key, value in overrides.items():
            if value is not None:
                settings[key] = value

        if converter is None:
            converter = create_converter(config=config)

        return cls(source_dir, converter=converter, **settings)

    def vector_target_path(self, source_path: str) -> str:
        """
        Get the raster path a vector source is rendered to.
        """
        target_dir = self.intermediate_dir if self.two_stage else self.output_dir
        return derive_target_path(source_path, target_dir, self.target_extension)

    def raster_target_path(self, source_path: str) -> str:
        """
        Get the final target path of a raster source.
        """
        return derive_target_path(source_path, self.output_dir, self.target_extension)

    def run(self) -> SyncReport:
        """
        Run the vector pass and then the raster pass.

        Returns:
            The report of the run.

        Raises:
            ConfigurationError: If two sources would produce the same target.
            ConversionError: If any conversion fails; the run stops there.
        """
        self._planned_rasters = []
        logger.debug(f"Syncing {self.source_dir} -> {self.output_dir} at width {self.target_width}")

        self.check_target_collisions()

        self.report.start_timing("total")
        try:
            self.sync_vector_assets()
            self.sync_raster_assets()
        finally:
            self.report.end_timing("total")

        logger.debug(
            f"Sync finished: {len(self.report.converted)} converted, "
            f"{len(self.report.skipped)} up to date, {len(self.report.planned)} planned"
        )
        return self.report

    def sync_vector_assets(self) -> List[str]:
        """
        Rasterize every vector source whose raster is missing or stale.

        Returns:
            Paths of the rasters that were written.

        Raises:
            ConversionError: If rasterization fails.
        """
        width = self.intermediate_width if self.two_stage else self.target_width
        generated = []

        self.report.start_timing(VECTOR_STAGE)
        try:
            for source in self._vector_sources():
                target = self.vector_target_path(source.path)

                if not self._needs_update(source, target):
                    logger.debug(f"Up to date: {target}")
                    self.report.record_skip(source.kind, source.path, target)
                    continue

                if self.dry_run:
                    logger.info(f"Would rasterize {source.path} -> {target}")
                    self.report.record_planned(source.kind, "rasterize", source.path, target)
                    if self.two_stage:
                        self._planned_rasters.append(target)
                    continue

                self._convert("rasterize", source, target, width)
                generated.append(target)
        finally:
            self.report.end_timing(VECTOR_STAGE)

        return generated

    def sync_raster_assets(self) -> List[str]:
        """
        Scale every raster source whose target is missing or stale.

        The source and intermediate directories are listed afresh, so rasters
        written by sync_vector_assets() in two-stage mode are included.

        Returns:
            Paths of the targets that were written.

        Raises:
            ConversionError: If scaling fails.
        """
        generated = []

        self.report.start_timing(RASTER_STAGE)
        try:
            for source in self._raster_sources(self._planned_rasters):
                target = self.raster_target_path(source.path)
                planned = source.path in self._planned_rasters

                if not planned and not self._needs_update(source, target):
                    logger.debug(f"Up to date: {target}")
                    self.report.record_skip(source.kind, source.path, target)
                    continue

                if self.dry_run:
                    logger.info(f"Would scale {source.path} -> {target} (width: {self.target_width})")
                    self.report.record_planned(source.kind, "scale", source.path, target)
                    continue

                self._convert("scale", source, target, self.target_width)
                generated.append(target)
        finally:
            self.report.end_timing(RASTER_STAGE)

        return generated

    def status(self) -> List[Dict[str, str]]:
        """
        List the conversions a run would perform, without writing anything.

        Returns:
            One entry per stale pair with "stage", "action", "source" and "target".

        Raises:
            ConfigurationError: If two sources would produce the same target.
        """
        self.check_target_collisions()

        plan = []
        pending = []

        for source in self._vector_sources():
            target = self.vector_target_path(source.path)
            if self._needs_update(source, target):
                plan.append({"stage": VECTOR_STAGE, "action": "rasterize", "source": source.path, "target": target})
                if self.two_stage:
                    pending.append(target)

        for source in self._raster_sources(pending):
            target = self.raster_target_path(source.path)
            if source.path in pending or self._needs_update(source, target):
                plan.append({"stage": RASTER_STAGE, "action": "scale", "source": source.path, "target": target})

        return plan

    def check_target_collisions(self) -> None:
        """
        Check that no two authored sources produce the same final target.

        A vector ``door.svg`` and an authored ``door.png`` would both end up
        as ``<output_dir>/door.png``.

        Raises:
            ConfigurationError: If a vector and a raster source share a stem.
        """
        raster_stems = {source.stem for source in self._authored_raster_sources()}
        clashes = [
            os.path.basename(source.path) for source in self._vector_sources()
            if source.stem in raster_stems
        ]
        if clashes:
            raise ConfigurationError(
                "Vector and raster sources with the same name would write the same target: "
                + ", ".join(clashes),
                component="sync"
            )

    def _vector_sources(self) -> List[SourceAsset]:
        return [
            SourceAsset(path, VECTOR_STAGE)
            for path in list_source_files(self.source_dir, self.vector_extensions)
        ]

    def _authored_raster_sources(self) -> List[SourceAsset]:
        return [
            SourceAsset(path, RASTER_STAGE)
            for path in list_source_files(self.source_dir, self.raster_extensions)
        ]

    def _raster_sources(self, extra: Sequence[str]) -> List[SourceAsset]:
        paths = list_source_files(self.source_dir, self.raster_extensions)
        if self.two_stage and os.path.isdir(self.intermediate_dir):
            paths += list_source_files(self.intermediate_dir, self.raster_extensions)
        paths += [path for path in extra if path not in paths]
        return [SourceAsset(path, RASTER_STAGE) for path in sorted(paths, key=os.path.basename)]

    def _needs_update(self, source: SourceAsset, target: str) -> bool:
        if self.force or source.mtime_ns is None:
            return True
        return is_stale(source.path, target)

    def _convert(self, action: str, source: SourceAsset, target: str, width: Optional[int]) -> None:
        try:
            ensure_dir(os.path.dirname(target))
            if action == "rasterize":
                self.converter.rasterize(source.path, target, width)
            else:
                self.converter.scale(source.path, target, width)
        except ConversionError as e:
            self._record_failure(source, e)
            raise
        except OSError as e:
            error = ConversionError(
                message=f"Cannot write {target}: {e}",
                returncode=1,
                source=source.path
            )
            self._record_failure(source, error)
            raise error from e

        self.report.record_conversion(source.kind, action, source.path, target)

    def _record_failure(self, source: SourceAsset, error: ConversionError) -> None:
        self.report.record_error(source.kind, str(error), source=source.path, returncode=error.returncode)
        log_conversion_error(error)

    @staticmethod
    def _check_width(width: Any, key: str) -> int:
        if isinstance(width, bool) or not isinstance(width, int) or width < 1:
            raise ConfigurationError(
                f"Width must be a positive integer, got {width!r}",
                component="sync",
                invalid_keys=[key]
            )
        return width
