"""Click subcommands registered on the ``basexxx`` group."""
