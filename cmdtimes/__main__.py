"""Allow `python -m cmdtimes`."""

from cmdtimes.interfaces.cli.cli_main import main

raise SystemExit(main())
