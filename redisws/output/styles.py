class Style:
    info = 'bold blue'
    mark = 'bold cyan'
    mark_neutral = 'bold white'
    context = 'dim'
    good = 'green'
    suspicious = 'yellow'
    bad = 'bold red'
