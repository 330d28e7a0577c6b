"""Send Composer update check reports to chat, issue tracker and e-mail services."""
