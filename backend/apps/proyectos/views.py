"""
API endpoints for teachers, projects, metrics and the audit trail.
Plain APIViews over services.py; store errors surface through DRF's
exception handler with their own status codes.
"""
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.proyectos import audit, metrics, services
from apps.proyectos.serializers import (
    TeacherSerializer, ProjectSerializer, TeacherAuditRecordSerializer,
    TeacherWriteSerializer, ProjectWriteSerializer,
    EmploymentTypeQuerySerializer,
)


# ══════════════════════════════════════════════════
# TEACHERS
# ══════════════════════════════════════════════════

class TeacherListCreateView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        teachers = services.list_teachers()
        return Response(TeacherSerializer(teachers, many=True).data)

    def post(self, request):
        ser = TeacherWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        teacher_id = services.create_teacher(ser.validated_data, request.user)
        return Response({'teacher_id': teacher_id}, status=status.HTTP_201_CREATED)


class TeacherDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        teacher = services.read_teacher(pk)
        return Response(TeacherSerializer(teacher).data)

    def put(self, request, pk):
        ser = TeacherWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        teacher = services.update_teacher(pk, ser.validated_data, request.user)
        return Response(TeacherSerializer(teacher).data)

    def delete(self, request, pk):
        services.delete_teacher(pk, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


class TeacherHistoryView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        records = audit.history_for(pk)
        return Response(TeacherAuditRecordSerializer(records, many=True).data)


class TeacherAverageBudgetView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        return Response({
            'teacher_id': pk,
            'average_budget': str(metrics.average_budget(pk)),
        })


# ══════════════════════════════════════════════════
# PROJECTS
# ══════════════════════════════════════════════════

class ProjectListCreateView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        projects = services.list_projects()
        return Response(ProjectSerializer(projects, many=True).data)

    def post(self, request):
        ser = ProjectWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        project_id = services.create_project(ser.validated_data, request.user)
        return Response({'project_id': project_id}, status=status.HTTP_201_CREATED)


class ProjectDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        project = services.read_project(pk)
        return Response(ProjectSerializer(project).data)

    def put(self, request, pk):
        ser = ProjectWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        project = services.update_project(pk, ser.validated_data, request.user)
        return Response(ProjectSerializer(project).data)

    def delete(self, request, pk):
        services.delete_project(pk, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ProjectCostPerHourView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        return Response({
            'project_id': pk,
            'cost_per_hour': str(metrics.cost_per_hour(pk)),
        })


class ProjectStatusView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        return Response({'project_id': pk, 'status': metrics.status(pk)})


# ══════════════════════════════════════════════════
# METRICS + AUDIT
# ══════════════════════════════════════════════════

class EmploymentTypeCountView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        ser = EmploymentTypeQuerySerializer(data=request.query_params)
        ser.is_valid(raise_exception=True)
        employment_type = ser.validated_data['employment_type']
        return Response({
            'employment_type': employment_type,
            'project_count': metrics.count_by_employment_type(employment_type),
        })


class AuditUpdatesView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(TeacherAuditRecordSerializer(audit.list_updates(), many=True).data)


class AuditDeletesView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(TeacherAuditRecordSerializer(audit.list_deletes(), many=True).data)
