"""
URL patterns para o domínio de Pessoas.

Endpoints HTML:
- GET  /pessoas/                   - Lista
- GET  /pessoas/criar/             - Formulário de cadastro
- POST /pessoas/criar/             - Cadastrar
- GET  /pessoas/<id>/editar/       - Formulário de edição
- POST /pessoas/<id>/editar/       - Atualizar
- GET  /pessoas/<id>/remover/      - Confirmação
- POST /pessoas/<id>/remover/      - Remover

Endpoints API JSON:
- GET/POST        /pessoas/api/
- GET/PUT/DELETE  /pessoas/api/<id>/
"""

from django.urls import path
from . import views
from . import api_views

app_name = 'pessoas'

urlpatterns = [
    # =========================================================================
    # Views HTML (Templates)
    # =========================================================================

    path('', views.PessoaListView.as_view(), name='list'),
    path('criar/', views.PessoaCreateView.as_view(), name='create'),
    path('<int:pk>/editar/', views.PessoaUpdateView.as_view(), name='update'),
    path('<int:pk>/remover/', views.PessoaDeleteView.as_view(), name='delete'),

    # =========================================================================
    # API JSON
    # =========================================================================

    path('api/', api_views.PessoaAPIListView.as_view(), name='api_list'),
    path('api/<int:pk>/', api_views.PessoaAPIDetailView.as_view(), name='api_detail'),
]
