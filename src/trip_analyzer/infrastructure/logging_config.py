import logging
from typing import Any, MutableMapping

def configure_logging(verbose: bool = False) -> None:
    """Con verbose=True vengono mostrate anche le righe scartate in ingestione."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)-8s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

class LayerLoggerAdapter(logging.LoggerAdapter):
    def process(
        self,
        msg: Any,
        kwargs: MutableMapping[str, Any],
    ) -> tuple[Any, MutableMapping[str, Any]]:
        layer_name = self.extra.get("layer", "Generic") if self.extra else "Generic"
        return f"[{layer_name}] {msg}", kwargs

def get_layer_logger(name: str, layer: str) -> LayerLoggerAdapter:
    return LayerLoggerAdapter(logging.getLogger(name), {"layer": layer})
