"""Main entry point for the glass_solver package."""
from glass_solver.cli import cli


def main():
    """Main entry point function."""
    cli()


if __name__ == "__main__":
    main()
