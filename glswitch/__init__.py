"""gl-driver-switch - swap the system GLX/OpenGL links to a vendor driver."""
