"""Record readers registered with :mod:`kdvbundle.io`."""
