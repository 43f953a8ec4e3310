"""Application layer: command-line front end over jbrecent.core."""
