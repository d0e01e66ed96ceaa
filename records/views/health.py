from django.conf import settings
from django.db import DatabaseError, connections
from django.http import JsonResponse


def healthz(request):
    checks = {}
    for alias in ('default', 'replica'):
        if alias not in settings.DATABASES:
            continue
        try:
            with connections[alias].cursor() as c:
                c.execute('SELECT 1')
                row = c.fetchone()
        except DatabaseError as e:
            return JsonResponse({'ok': False, 'db': alias, 'error': str(e)}, status=500)
        checks[alias] = bool(row and row[0] == 1)
    return JsonResponse({'ok': all(checks.values()), 'db': checks})
