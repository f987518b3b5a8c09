"""gomvc -- scaffold and tear down a Go (Gin) MVC project skeleton."""

__version__ = "0.1.0"
