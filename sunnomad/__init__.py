"""SunNomad backend: community store, place diagnostics and app manifest."""
