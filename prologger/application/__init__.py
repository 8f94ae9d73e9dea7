"""Application layer: the ports the logger and its collaborators satisfy."""
