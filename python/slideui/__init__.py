"""Terminal and windowed frontends for the sliding puzzle engine."""
