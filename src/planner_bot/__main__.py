# src/planner_bot/__main__.py

from .cli.main import main

main()
