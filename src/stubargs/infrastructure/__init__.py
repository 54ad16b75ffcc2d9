"""Infrastructure layer — text buffers and signature resolution."""
