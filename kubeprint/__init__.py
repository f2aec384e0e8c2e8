"""kubeprint - print kubeadm cluster configuration that needs manual upgrading."""

__version__ = "0.1.0"
