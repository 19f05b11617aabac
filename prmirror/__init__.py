"""
PR Mirror — Copy a fork pull request into a trusted tracking branch.

Clones the target repository, fetches the pull request head into a
``mirror/pr-<number>`` branch, pushes it and opens a companion PR.
A sync run re-points an existing mirror branch at the latest PR head.
"""

__version__ = "1.0.0"
