"""Libraries re-pointed by set-link, in processing order."""

from .LibraryDescriptor import LibraryDescriptor

LIBRARY_DESCRIPTORS: tuple[LibraryDescriptor, ...] = (
    LibraryDescriptor("libGL.so.1", "libGL.so.1"),
    LibraryDescriptor("libEGL.so.1", "libEGL.so.1"),
    LibraryDescriptor("libGLESv1_CM.so.1", "libGLESv1_CM.so.1"),
    LibraryDescriptor("libGLESv2.so.2", "libGLESv2.so.2"),
    # Vendors ship libglx.so.1, but the X server loads libglx.so
    LibraryDescriptor("libglx.so.1", "libglx.so", "extension"),
)
