"""
Built-in commands, loaded by dispatch_bot.commands.loader.
"""
