"""Interactive command-line front end for the phone book."""
