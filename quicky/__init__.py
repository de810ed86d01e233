"""Protocol toolkit for QCY Bluetooth earbuds: packets, commands, notifications, advertisements and products."""

__version__ = "0.1.0"