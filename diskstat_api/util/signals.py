from blinker import Signal

on_disk_stats_update = Signal()
