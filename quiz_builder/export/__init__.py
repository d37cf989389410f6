"""Quiz Export - Bundle HTML/JSON para embutir em paginas de CMS."""

from .bundle import ExportBundle, build_export_bundle, validate_for_export

__all__ = ["ExportBundle", "build_export_bundle", "validate_for_export"]
