"""Realtime Broker API Server - Main Entry Point."""

from realtime_broker.server import main

if __name__ == "__main__":
    main()
