from benangmerah_driver.drivers.json_records import JsonRecordsDriver

__all__ = ["JsonRecordsDriver"]
