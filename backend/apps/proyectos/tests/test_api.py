import datetime

import pytest

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.proyectos.models import Teacher, Project, TeacherAuditRecord
from apps.proyectos.tests.factories import (
    create_user, create_teacher, create_project, teacher_payload,
)


class TeacherAPITests(APITestCase):
    def setUp(self):
        self.user = create_user(username='coordinadora')
        self.client.force_authenticate(user=self.user)

    def test_requires_authentication(self):
        self.client.force_authenticate(user=None)
        res = self.client.get(reverse('proyectos:teacher-list'))
        self.assertIn(res.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))

    def test_create_returns_id_and_defaults_years(self):
        payload = teacher_payload()
        payload['years_experience'] = None
        res = self.client.post(reverse('proyectos:teacher-list'), payload, format='json')
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        teacher = Teacher.objects.get(pk=res.data['teacher_id'])
        self.assertEqual(teacher.years_experience, 0)

    def test_create_duplicate_document_is_400(self):
        create_teacher(document_number='CC1002')
        res = self.client.post(reverse('proyectos:teacher-list'), teacher_payload(), format='json')
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data['detail'].code, 'constraint_violation')
        self.assertEqual(Teacher.objects.count(), 1)

    def test_create_negative_years_is_400(self):
        res = self.client.post(reverse('proyectos:teacher-list'),
                               teacher_payload(years_experience=-1), format='json')
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Teacher.objects.count(), 0)

    def test_read_and_list(self):
        teacher = create_teacher()
        res = self.client.get(reverse('proyectos:teacher-detail', kwargs={'pk': teacher.pk}))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data['full_name'], 'Ana Gómez')

        res = self.client.get(reverse('proyectos:teacher-list'))
        self.assertEqual([t['id'] for t in res.data], [teacher.pk])

    def test_read_missing_is_404(self):
        res = self.client.get(reverse('proyectos:teacher-detail', kwargs={'pk': 999}))
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_update_returns_entity_and_audits_with_username(self):
        teacher = create_teacher()
        url = reverse('proyectos:teacher-detail', kwargs={'pk': teacher.pk})
        res = self.client.put(url, teacher_payload(document_number='CC1001',
                                                   full_name='Ana M. Gómez'), format='json')
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data['full_name'], 'Ana M. Gómez')

        rec = TeacherAuditRecord.objects.get()
        self.assertEqual(rec.kind, 'UPDATED')
        self.assertEqual(rec.full_name, 'Ana M. Gómez')
        self.assertEqual(rec.principal, 'coordinadora')

    def test_delete_restricted_while_leading_projects(self):
        project = create_project()
        url = reverse('proyectos:teacher-detail', kwargs={'pk': project.lead_teacher_id})
        res = self.client.delete(url)
        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        self.assertTrue(Teacher.objects.filter(pk=project.lead_teacher_id).exists())
        self.assertEqual(TeacherAuditRecord.objects.count(), 0)

    def test_delete_and_history(self):
        teacher = create_teacher()
        res = self.client.delete(reverse('proyectos:teacher-detail', kwargs={'pk': teacher.pk}))
        self.assertEqual(res.status_code, status.HTTP_204_NO_CONTENT)

        res = self.client.get(reverse('proyectos:teacher-history', kwargs={'pk': teacher.pk}))
        self.assertEqual(len(res.data), 1)
        self.assertEqual(res.data[0]['kind'], 'DELETED')
        self.assertEqual(res.data[0]['principal'], 'coordinadora')

        res = self.client.get(reverse('proyectos:audit-deletes'))
        self.assertEqual([r['teacher_id'] for r in res.data], [teacher.pk])
        res = self.client.get(reverse('proyectos:audit-updates'))
        self.assertEqual(res.data, [])

    def test_average_budget_endpoint(self):
        teacher = create_teacher()
        res = self.client.get(reverse('proyectos:teacher-average-budget', kwargs={'pk': teacher.pk}))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data['average_budget'], '0.00')


class ProjectAPITests(APITestCase):
    def setUp(self):
        self.user = create_user(username='coordinadora')
        self.client.force_authenticate(user=self.user)
        self.teacher = create_teacher()

    def _payload(self, **overrides):
        data = {
            'name': 'App Biblioteca',
            'description': 'App móvil de préstamos',
            'start_date': '2025-03-01',
            'end_date': None,
            'budget': '9000000.00',
            'hours': 320,
            'lead_teacher_id': self.teacher.pk,
        }
        data.update(overrides)
        return data

    def test_create_and_read_with_lead_teacher_name(self):
        res = self.client.post(reverse('proyectos:project-list'), self._payload(), format='json')
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        project_id = res.data['project_id']

        res = self.client.get(reverse('proyectos:project-detail', kwargs={'pk': project_id}))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data['lead_teacher_name'], 'Ana Gómez')
        self.assertEqual(res.data['budget'], '9000000.00')
        self.assertEqual(res.data['cost_per_hour'], '28125.00')

    def test_create_with_unknown_teacher_is_404(self):
        res = self.client.post(reverse('proyectos:project-list'),
                               self._payload(lead_teacher_id=9999), format='json')
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(Project.objects.count(), 0)

    def test_create_with_end_before_start_is_400(self):
        res = self.client.post(reverse('proyectos:project-list'),
                               self._payload(end_date='2025-02-01'), format='json')
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data['detail'].code, 'constraint_violation')

    def test_update_defaults_nulls_and_returns_entity(self):
        project = create_project(lead_teacher=self.teacher)
        url = reverse('proyectos:project-detail', kwargs={'pk': project.pk})
        res = self.client.put(url, self._payload(budget=None, hours=None), format='json')
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data['budget'], '0.00')
        self.assertEqual(res.data['hours'], 0)
        self.assertEqual(res.data['cost_per_hour'], '0.00')

    def test_delete_project_then_missing(self):
        project = create_project(lead_teacher=self.teacher)
        url = reverse('proyectos:project-detail', kwargs={'pk': project.pk})
        self.assertEqual(self.client.delete(url).status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(self.client.delete(url).status_code, status.HTTP_404_NOT_FOUND)

    def test_metric_endpoints(self):
        project = create_project(lead_teacher=self.teacher, budget='1000.00', hours=100,
                                 start_date=datetime.date(2999, 1, 1))
        res = self.client.get(reverse('proyectos:project-cost-per-hour', kwargs={'pk': project.pk}))
        self.assertEqual(res.data['cost_per_hour'], '10.00')

        res = self.client.get(reverse('proyectos:project-status', kwargs={'pk': project.pk}))
        self.assertEqual(res.data['status'], 'Not started')

        res = self.client.get(reverse('proyectos:project-status', kwargs={'pk': 424242}))
        self.assertEqual(res.data['status'], 'Not found')

        res = self.client.get(reverse('proyectos:projects-by-employment-type'),
                              {'employment_type': 'Tiempo completo'})
        self.assertEqual(res.data['project_count'], 1)

    def test_employment_type_count_requires_parameter(self):
        res = self.client.get(reverse('proyectos:projects-by-employment-type'))
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)


@pytest.mark.django_db
def test_update_via_api_records_session_username(auth_client, teacher):
    url = reverse('proyectos:teacher-detail', kwargs={'pk': teacher.pk})
    res = auth_client.put(url, teacher_payload(document_number=teacher.document_number,
                                               years_experience=None), format='json')
    assert res.status_code == status.HTTP_200_OK
    assert res.data['years_experience'] == 0

    res = auth_client.get(reverse('proyectos:audit-updates'))
    assert [r['principal'] for r in res.data] == ['coordinadora']
    assert res.data[0]['kind_display'] == 'Updated'


@pytest.mark.django_db
def test_anonymous_client_is_rejected(api_client, teacher):
    res = api_client.delete(reverse('proyectos:teacher-detail', kwargs={'pk': teacher.pk}))
    assert res.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)
    assert TeacherAuditRecord.objects.count() == 0
