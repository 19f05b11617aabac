"""
Mirror Operations — git and gh sequences behind the CLI.

Each operation is a fixed list of commands run in the mirror-repo
workspace; the first failing command aborts the rest.
"""
