"""
FILE: eisenhower/cli/commands/system.py
PURPOSE: System commands (version, help, repl)
"""

import typer

# Import shared objects from main module
# These will be available after main.py imports this module
from ..main import app, console, error_console, __version__


@app.command()
def version():
    """Show Eisenhower version."""
    console.print(f"Eisenhower v{__version__}")


@app.command()
def help():
    """Show available commands and usage."""
    console.print("\n[bold cyan]Eisenhower[/bold cyan] - Triage tasks into urgent/important quadrants\n")
    console.print(f"[dim]Version {__version__}[/dim]\n")

    console.print("[bold]Usage:[/bold]")
    console.print("  eisenhower \\[command] \\[options]")
    console.print("  eisenhower                    [dim]# Launch interactive REPL (default)[/dim]\n")

    console.print("[bold]Commands:[/bold]")

    commands = [
        ("add", "Add a task to the inbox", 'eisenhower add "Task text"'),
        ("board", "Show inbox and quadrants", "eisenhower board [--json] [--raw]"),
        ("ls", "Show one list (or the board)", "eisenhower ls \\[list]"),
        ("mv", "Move task to another list", "eisenhower mv <task_id> <list> [--from <list>]"),
        ("done", "Check off task(s)", "eisenhower done <task_id>[,<task_id>...]"),
        ("rm", "Remove task from one list", "eisenhower rm <task_id> <list>"),
        ("lists", "Show list names", "eisenhower lists"),
        ("repl", "Launch interactive REPL", "eisenhower repl"),
        ("version", "Show version", "eisenhower version"),
        ("help", "Show this help message", "eisenhower help"),
    ]

    for cmd, desc, example in commands:
        console.print(f"  [green]{cmd:8}[/green] {desc}")
        console.print(f"           [dim]{example}[/dim]\n")

    console.print("[bold]Lists:[/bold]")
    console.print("  [yellow]inbox[/yellow]      Task Inbox (new tasks land here)")
    console.print("  [yellow]do[/yellow]         Do First - Urgent & Important")
    console.print("  [yellow]schedule[/yellow]   Schedule - Important, Not Urgent")
    console.print("  [yellow]delegate[/yellow]   Delegate - Urgent, Not Important")
    console.print("  [yellow]eliminate[/yellow]  Eliminate - Not Urgent, Not Important\n")

    console.print("[bold]Global Options:[/bold]")
    console.print("  [yellow]--verbose[/yellow] Show debug logging on stderr")
    console.print("  [yellow]--help[/yellow]    Show detailed help for a command\n")

    console.print("[bold]Examples:[/bold]")
    console.print("  eisenhower                          # Launch REPL (default)")
    console.print('  eisenhower add "Write report"')
    console.print("  eisenhower mv 1a2b3c do             # Task IDs can be shortened")
    console.print("  eisenhower mv 1a2b3c eliminate --from schedule")
    console.print("  eisenhower done 1a2b,3c4d           # Check off several tasks")
    console.print("  eisenhower ls do --json\n")


@app.command()
def repl():
    """
    Launch interactive REPL mode.

    The REPL provides:
    - Command history (up/down arrows)
    - Autocomplete (Tab key)
    - Drag and drop across commands (drag, drop, cancel)
    - Exit with Ctrl+D or type 'exit'

    Example:
        eisenhower repl
    """
    # Import here to avoid loading REPL dependencies for one-shot commands
    from ...repl import main as repl_main

    try:
        repl_main()
    except Exception as e:
        error_console.print(f"[red]Error starting REPL:[/red] {e}")
        raise typer.Exit(1)
