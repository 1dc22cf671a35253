"""
URL Configuration para o Cadastro de Pessoas.

Estrutura:
- /admin/    - Django Admin
- /pessoas/  - Views HTML e API JSON de Pessoas
- /health/   - Health check
- /          - Redireciona para /pessoas/
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include
from django.views.generic import RedirectView


def health(request):
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    path('admin/', admin.site.urls),
    path('pessoas/', include('src.adapters.django_app.pessoas.urls')),
    path('health/', health, name='health'),
    path('', RedirectView.as_view(pattern_name='pessoas:list', permanent=False)),
]
