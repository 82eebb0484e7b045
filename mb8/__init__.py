"""MB8 virtual machine: instruction set, encoder, decoder, interpreter and display."""

__version__ = "0.1.0"