"""Run the console game with ``python -m blackjack``."""

from blackjack.cli import main

raise SystemExit(main())
