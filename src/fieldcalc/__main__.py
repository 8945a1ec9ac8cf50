"""Command-line interface."""
from fieldcalc.main import main


if __name__ == "__main__":
    main()
