"""Token top-up report: join users to companies and render the top-up report."""

__version__ = "1.0.0"
