#!/usr/bin/env python3
"""Entry point for running the event reminder system from a checkout."""

from event_reminder.app import main

if __name__ == "__main__":
    main()
