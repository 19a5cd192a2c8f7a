from oats.reader.parser import Reader, read_all, read_one

__all__ = ["Reader", "read_all", "read_one"]
