#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
CIP-136 Rationale Wizard
Main entry point for the application
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from services.document.schema_profiles import get_schema_profile
from ui.wizards.rationale import RationaleWizard
from utils.logger import setup_logger


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    logger = setup_logger()

    app = QApplication(sys.argv)
    app.setApplicationName(Config.APP_NAME)
    app.setOrganizationName(Config.ORGANIZATION)

    logger.info("=" * 60)
    logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
    logger.info("=" * 60)

    try:
        profile = get_schema_profile(Config.SCHEMA_PROFILE)
    except ValueError as e:
        logger.error(str(e))
        return 2

    logger.info(f"Schema profile: {profile.name}")

    wizard = RationaleWizard(profile)
    wizard.wizard_completed.connect(lambda path: logger.info(f"Rationale written to {path}"))
    wizard.show()

    exit_code = app.exec_()
    logger.info(f"Application exited with code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
