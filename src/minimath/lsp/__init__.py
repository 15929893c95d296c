"""Language server support for minimath documents."""
