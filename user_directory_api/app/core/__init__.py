"""Cross‑cutting concerns: settings, logging, errors and middleware."""
