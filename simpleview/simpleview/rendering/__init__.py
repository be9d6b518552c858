"""Template execution, placeholders and view composition."""
