"""
HirePanel Main Entry Point

Initializes logging, configuration and the database connection, then
launches the GUI.
"""

import sys
from typing import Optional

from hirepanel.data.models import Viewer


def main(viewer: Optional[Viewer] = None, job_id: Optional[str] = None) -> int:
    """
    Main entry point for the HirePanel desktop application.

    Args:
        viewer: Who is using the app; defaults to the session settings.
        job_id: Job whose candidates open first, if any.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        # Initialize logging first
        from hirepanel.utils.logger import setup_logging, log

        setup_logging()
        log.info("Starting HirePanel application...")

        from hirepanel.utils.config import get_settings

        settings = get_settings()
        log.info(f"Environment: {settings.environment}")
        log.info(f"Debug mode: {settings.debug}")

        log.info("Initializing database connection...")
        from hirepanel.data.database import get_database_manager

        db_manager = get_database_manager()
        if db_manager.check_sync_connection():
            log.info("Database connection established")
        else:
            log.warning(
                "Could not connect to MongoDB. "
                "Screens will show empty data. Run 'hirepanel init-db' to initialize."
            )

        log.info("Launching user interface...")
        from hirepanel.ui.main_window import run_application

        return run_application(viewer=viewer, job_id=job_id)

    except KeyboardInterrupt:
        print("\nApplication interrupted by user.")
        return 130
    except Exception as e:
        print(f"Fatal error: {e}")
        import traceback

        traceback.print_exc()
        return 1


def gui_main():
    """Entry point for the GUI script."""
    sys.exit(main())


if __name__ == "__main__":
    sys.exit(main())
