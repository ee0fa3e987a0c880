from django.urls import path
from . import views

app_name = 'pages'

urlpatterns = [
    path('<int:pk>/', views.page_detail, name='page_detail'),
    path('api/tree/', views.api_tree, name='api_tree'),
    path('api/tree/<int:root_id>/', views.api_tree, name='api_tree_root'),
    path("api/nodes/<int:node_id>/ancestors/", views.get_ancestor_nodes, name="get_ancestor_nodes"),
    path("api/nodes/<int:node_id>/descendants/", views.get_descendant_nodes, name="get_descendant_nodes"),
]
