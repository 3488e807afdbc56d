"""Example command-line program built on subcmd."""
