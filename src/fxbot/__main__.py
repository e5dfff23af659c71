# src/fxbot/__main__.py
from fxbot.app import main

main()
