"""Entry point: python -m www_launcher"""

from .cli import main

if __name__ == "__main__":
    main()
