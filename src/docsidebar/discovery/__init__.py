from docsidebar.discovery.inspector import SurfaceInspector

__all__ = ["SurfaceInspector"]
