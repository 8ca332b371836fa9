"""Timeline editor service: the single owner of the current layer state."""

import logging
from collections.abc import Iterable

from cliptrack.common.config import EngineConfig, get_engine_config
from cliptrack.timeline import operations
from cliptrack.timeline.errors import SplitRejectedError
from cliptrack.timeline.schemas import ClipKind, Layer
from cliptrack.timeline.snapping import find_snap_point, snap_points
from cliptrack.viewport.fit import clamp_zoom, fit_zoom

logger = logging.getLogger(__name__)


class TimelineEditorService:
    """Holds the committed layer and zoom and applies one edit at a time.

    Each method runs a pure operation against the current state and replaces
    the state with the result. Previews of an unfinished gesture should call
    the operations module directly and never reach this service.
    """

    def __init__(
        self,
        layer: Layer | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        """Initialize the editor.

        Args:
            layer: Starting layer; an empty layer when omitted.
            config: Engine limits; defaults to the process configuration.
        """
        self._config = config or get_engine_config()
        self._layer = layer if layer is not None else Layer()
        self._zoom = self._config.default_zoom

    @property
    def layer(self) -> Layer:
        """The committed layer state."""
        return self._layer

    @property
    def zoom(self) -> float:
        """The current zoom in pixels per second."""
        return self._zoom

    def _commit(self, layer: Layer, action: str) -> Layer:
        self._layer = layer
        logger.info(
            "[layer=%s] %s -> %d clips, %.3fs",
            layer.layer_id,
            action,
            len(layer.clips),
            layer.end_time,
        )
        return layer

    def load_source(
        self,
        duration: float,
        name: str = "Untitled",
        kind: ClipKind = ClipKind.VIDEO,
    ) -> Layer:
        """Replace the timeline with one full-length clip of a source file."""
        layer = Layer.from_source(
            duration,
            name=self._layer.name,
            clip_name=name,
            clip_kind=kind,
            layer_id=self._layer.layer_id,
            kind=self._layer.kind,
            is_visible=self._layer.is_visible,
            is_locked=self._layer.is_locked,
            accent_color=self._layer.accent_color,
        )
        return self._commit(layer, f"load {name!r} ({duration:.3f}s)")

    def move_or_resize(
        self,
        clip_id: str,
        start: float,
        duration: float | None = None,
        trim_start: float | None = None,
        trim_end: float | None = None,
    ) -> Layer:
        """Commit a plain move or resize of a clip."""
        layer = operations.move_or_resize(
            self._layer, clip_id, start, duration, trim_start, trim_end
        )
        return self._commit(layer, f"move {clip_id}")

    def resize_rolling(
        self,
        clip_id: str,
        start: float,
        duration: float,
        trim_start: float,
        trim_end: float,
    ) -> Layer:
        """Commit a rolling resize of a clip edge."""
        layer = operations.resize_rolling(
            self._layer,
            clip_id,
            start,
            duration,
            trim_start,
            trim_end,
            config=self._config,
        )
        return self._commit(layer, f"resize {clip_id}")

    def split(self, clip_id: str, split_time: float) -> Layer:
        """Commit a split; a rejected split leaves the state untouched and re-raises."""
        try:
            layer = operations.split(self._layer, clip_id, split_time, config=self._config)
        except SplitRejectedError as e:
            logger.warning("[layer=%s] %s", self._layer.layer_id, e)
            raise
        return self._commit(layer, f"split {clip_id} at {split_time:.3f}s")

    def delete(self, clip_id: str) -> Layer:
        """Commit a ripple delete of one clip."""
        layer = operations.delete_ripple(self._layer, clip_id)
        return self._commit(layer, f"delete {clip_id}")

    def delete_many(self, clip_ids: Iterable[str]) -> Layer:
        """Commit a ripple delete of several clips."""
        clip_ids = list(clip_ids)
        if not clip_ids:
            return self._layer
        layer = operations.delete_many_ripple(self._layer, clip_ids)
        return self._commit(layer, f"delete {len(clip_ids)} clips")

    def snap_points(self) -> list[float]:
        """Return the snap points of the committed layer."""
        return snap_points(self._layer)

    def snap(self, value: float) -> float:
        """Attract a dragged time to the nearest snap point of the committed layer."""
        return find_snap_point(value, self.snap_points(), config=self._config)

    def set_zoom(self, value: float) -> float:
        """Set a manual zoom, clamped to the configured range."""
        self._zoom = clamp_zoom(value, self._config)
        return self._zoom

    def auto_fit(self, viewport_width_px: float) -> float:
        """Fit the whole layer into the viewport and return the new zoom."""
        self._zoom = fit_zoom(self._layer.end_time, viewport_width_px, self._config)
        logger.debug(
            "[layer=%s] auto-fit %.3fs into %.0fpx -> %s px/s",
            self._layer.layer_id,
            self._layer.end_time,
            viewport_width_px,
            self._zoom,
        )
        return self._zoom
