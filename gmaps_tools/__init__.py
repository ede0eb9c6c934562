"""Google Maps Platform REST endpoints exposed as JSON-schema described tools."""
