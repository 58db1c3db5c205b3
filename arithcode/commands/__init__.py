"""Click subcommands registered by `arithcode.cli`."""
