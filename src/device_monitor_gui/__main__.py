from device_monitor_gui.app import run

run()
