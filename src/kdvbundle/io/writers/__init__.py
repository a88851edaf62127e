"""Output writers registered with :mod:`kdvbundle.io`."""
