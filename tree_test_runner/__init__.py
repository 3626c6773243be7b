"""Run an external test executable over every matching file in a directory tree."""
