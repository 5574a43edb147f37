"""Input/output helpers for the metro network.

This subpackage holds the presentation side of the project: turning
engine results into text reports for the command-line interface.
"""
