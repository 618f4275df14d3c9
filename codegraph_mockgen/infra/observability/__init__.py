from codegraph_mockgen.infra.observability.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
