import pytest
from rest_framework.test import APIClient
from django.contrib.auth import get_user_model

from apps.proyectos.tests.factories import create_teacher, create_project

User = get_user_model()

@pytest.fixture
def api_client():
    return APIClient()

@pytest.fixture
def coordinator(db):
    return User.objects.create_user('coordinadora', 'coord@uni.edu.co', 'password')

@pytest.fixture
def auth_client(api_client, coordinator):
    api_client.force_authenticate(user=coordinator)
    return api_client

@pytest.fixture
def teacher(db):
    return create_teacher()

@pytest.fixture
def project(teacher):
    return create_project(lead_teacher=teacher)
