"""Speaker controller web UI: serves the bundled page, stylesheet and script."""
