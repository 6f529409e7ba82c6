from django.urls import path
from . import views

app_name = 'meetings'

urlpatterns = [
    path('', views.index, name='index'),
    path('brackets/', views.brackets, name='brackets'),
    path('estimate/', views.estimate, name='estimate'),
]
