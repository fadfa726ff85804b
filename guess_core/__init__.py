"""
Guess-number core Python package.

Pure game logic shared by the Flask host (web.py) and the terminal host (cli.py).
Modules:
- state.py: GameState, GuessResult
- rng.py: random provider contract and implementations
- errors.py: GuessError and its five failure kinds
- config.py: environment configuration
- cli.py: interactive terminal game
- web.py: Flask host serving static/ and the JSON API
"""
