"""Pure derivations computed from network descriptors."""
