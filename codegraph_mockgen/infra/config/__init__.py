from codegraph_mockgen.infra.config.settings import MockgenSettings, get_settings

__all__ = ["MockgenSettings", "get_settings"]
