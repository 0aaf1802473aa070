"""configfileform -- turn a line-oriented config file into an HTML form.

Render mode produces an HTML fragment with one labelled input per
``key=value`` line. Request mode applies a CGI-style query string to the
same file and writes the updated configuration back out.
"""

__version__ = "0.1.0"
