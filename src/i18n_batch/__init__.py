"""Line-by-line batch translation through a web translation UI."""

__version__ = "0.1.0"
