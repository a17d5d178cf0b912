"""
Interface package: text front end for the tournament map.

Modules:
    cli: Line-oriented command loop over stdin/stdout driving a MapSession.
          Run as: python -m interface.cli --data <file or URL>
"""
