# SPDX-FileCopyrightText: 2025 Taras Paruta (partarstu@gmail.com)
#
# SPDX-License-Identifier: Apache-2.0

import argparse
import sys
from typing import Optional

import config
from reportportal import utils
from reportportal.exceptions import ReportPortalError
from reportportal.models import LaunchMode, ItemType, ItemStatus, LogLevel, Attachment
from reportportal.services.client import Client
from reportportal.services.launch import Launch
from reportportal.services.report_portal_client_provider import get_report_portal_client
from reportportal.services.test_item import TestItem

logger = utils.get_logger("report_launch")


def report_launch(client: Client, launch_name: str, message: str, attachment_path: Optional[str] = None,
                  status: ItemStatus = ItemStatus.PASSED) -> Launch:
    """
    Reports a launch with one suite and one nested test which carries a single log entry.
    """
    client.check_connect()

    launch = Launch(client, launch_name, "Reported by report_launch.py", LaunchMode.DEFAULT)
    launch.start()

    suite = TestItem(launch, "Suite", "Suite reported from the command line", ItemType.SUITE)
    suite.start()
    test = TestItem(launch, "Test", "Test reported from the command line", ItemType.TEST, parent=suite)
    test.start()

    attachment = Attachment.from_file(attachment_path) if attachment_path else None
    level = LogLevel.INFO if status == ItemStatus.PASSED else LogLevel.ERROR
    test.log(message, level, attachment)

    test.finish(status)
    suite.finish(status)
    launch.finish(status)
    return launch


def main():
    """
    Main function to parse arguments and report a launch.
    """
    parser = argparse.ArgumentParser(description="Report a sample launch to ReportPortal.")
    parser.add_argument("-e", "--endpoint", default=config.RP_ENDPOINT, help="ReportPortal endpoint.")
    parser.add_argument("-t", "--token", default=config.RP_TOKEN, help="User token for ReportPortal.")
    parser.add_argument("-p", "--project", default=config.RP_PROJECT, help="Project name.")
    parser.add_argument("-l", "--launch", default=config.RP_LAUNCH, help="Launch name.")
    parser.add_argument("-m", "--message", default="Log message from report_launch.py", help="Log message.")
    parser.add_argument("-a", "--attachment", help="Path of a file attached to the log message.")
    parser.add_argument("-s", "--status", default=ItemStatus.PASSED.value,
                        choices=[status.value for status in ItemStatus], help="Status of the reported items.")
    args = parser.parse_args()

    try:
        client = get_report_portal_client(args.endpoint, args.project, args.token)
        launch = report_launch(client, args.launch, args.message, args.attachment, ItemStatus(args.status))
        logger.info(f"Launch '{launch.name}' reported with ID: {launch.id}")
        print(launch.id)
    except (ValueError, RuntimeError, ReportPortalError) as e:
        logger.error(f"An error occurred: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
