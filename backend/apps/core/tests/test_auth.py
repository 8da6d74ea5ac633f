from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

User = get_user_model()


class SessionAuthTests(APITestCase):
    def setUp(self):
        self.user = User.objects.create_user(username='coordinadora', password='clave-segura-1')

    def test_login_returns_user_and_csrf_token(self):
        res = self.client.post(reverse('core:login'),
                               {'username': 'coordinadora', 'password': 'clave-segura-1'},
                               format='json')
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data['user']['username'], 'coordinadora')
        self.assertEqual(res.data['user']['role'], 'COORDINATOR')
        self.assertTrue(res.data['csrfToken'])

    def test_login_rejects_bad_password(self):
        res = self.client.post(reverse('core:login'),
                               {'username': 'coordinadora', 'password': 'otra'},
                               format='json')
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_login_requires_both_fields(self):
        res = self.client.post(reverse('core:login'), {'username': 'coordinadora'}, format='json')
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_me_and_logout(self):
        self.client.force_authenticate(user=self.user)
        res = self.client.get(reverse('core:me'))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data['user']['username'], 'coordinadora')

        res = self.client.post(reverse('core:logout'))
        self.assertEqual(res.status_code, status.HTTP_200_OK)

    def test_me_requires_session(self):
        res = self.client.get(reverse('core:me'))
        self.assertIn(res.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))

    def test_staff_user_is_reported_as_admin(self):
        admin = User.objects.create_user(username='dhincapie', password='x', is_staff=True)
        self.client.force_authenticate(user=admin)
        res = self.client.get(reverse('core:me'))
        self.assertEqual(res.data['user']['role'], 'ADMIN')
