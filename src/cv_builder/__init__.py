def main() -> int:
    """Entry point for the application.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    from cv_builder.cli import main as cli_main

    return cli_main()
