"""Run the bibcite command line interface."""

from bibcite.cli.main import main

if __name__ == "__main__":
    main()
