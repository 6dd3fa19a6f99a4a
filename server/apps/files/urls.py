"""URL configuration for files app."""

from django.urls import path

from server.apps.files import views

app_name = 'files'

urlpatterns = [
    path('', views.paginated_files, name='paginated'),
    path('upload', views.upload_file, name='upload'),
    path('<int:file_id>', views.file_content, name='content'),
    path('<int:file_id>/metadata', views.file_metadata, name='metadata'),
    path('tag/<str:tag_name>', views.files_by_tag, name='by-tag'),
]
