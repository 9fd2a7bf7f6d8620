"""Sample records loaded into a fresh store, keyed by collection name."""

SEED_DOCUMENTS = {
    "excos": [
        {
            "name": "Adamu Jibril",
            "position": "State Coordinator",
            "email": "adamu.jibril@nysc.gov.ng",
            "phone": "+234 803 XXX 1234",
            "image_url": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=150&h=150&fit=crop&crop=face",
            "is_active": True,
        },
        {
            "name": "Fatima Musa",
            "position": "Assistant Coordinator",
            "email": "fatima.musa@nysc.gov.ng",
            "phone": "+234 803 XXX 5678",
            "image_url": "https://images.unsplash.com/photo-1494790108755-2616b612b786?w=150&h=150&fit=crop&crop=face",
            "is_active": True,
        },
        {
            "name": "Michael Chen",
            "position": "Secretary",
            "email": "michael.chen@nysc.gov.ng",
            "phone": "+234 803 XXX 9012",
            "image_url": "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=150&h=150&fit=crop&crop=face",
            "is_active": True,
        },
    ],
    "developers": [
        {
            "name": "Alex Rivera",
            "email": "alex.rivera@email.com",
            "role": "Full Stack Developer",
            "skills": ["React", "Node.js", "TypeScript"],
            "status": "active",
            "image_url": "https://images.unsplash.com/photo-1519085360753-af0119f7cbe7?w=150&h=150&fit=crop&crop=face",
        },
        {
            "name": "Emily Zhang",
            "email": "emily.zhang@email.com",
            "role": "Frontend Developer",
            "skills": ["Vue.js", "CSS", "JavaScript"],
            "status": "active",
            "image_url": "https://images.unsplash.com/photo-1438761681033-6461ffad8d80?w=150&h=150&fit=crop&crop=face",
        },
    ],
    "events": [
        {
            "title": "Community Outreach Program",
            "description": "Join us for our monthly community development initiative in Jos North communities.",
            "date": "2024-12-15",
            "time": "08:00 - 16:00",
            "location": "Jos North LGA",
            "category": "Community Service",
            "image_url": "https://images.unsplash.com/photo-1559027615-cd4628902d4a?w=600&h=300&fit=crop",
            "status": "published",
        },
        {
            "title": "Skills Development Workshop",
            "description": "Enhance your professional skills with our comprehensive training program.",
            "date": "2024-12-20",
            "time": "09:00 - 16:00",
            "location": "Training Center",
            "category": "Training",
            "image_url": "https://images.unsplash.com/photo-1552664730-d307ca884978?w=600&h=300&fit=crop",
            "status": "published",
        },
        {
            "title": "Annual Cultural Festival",
            "description": "Celebrate Nigeria's rich cultural heritage with music, dance, and traditional cuisine.",
            "date": "2024-12-25",
            "time": "10:00 - 18:00",
            "location": "Cultural Center",
            "category": "Cultural",
            "image_url": "https://images.unsplash.com/photo-1533174072545-7a4b6ad7a6c3?w=600&h=300&fit=crop",
            "status": "published",
        },
    ],
    "resources": [
        {
            "title": "NYSC Handbook 2024",
            "description": "Complete guide for corps members",
            "category": "Documents",
            "file_url": "/documents/nysc-handbook-2024.pdf",
            "file_type": "PDF",
            "file_size": "2.3 MB",
        },
        {
            "title": "Service Certificate Form",
            "description": "Official service certificate application form",
            "category": "Forms",
            "file_url": "/documents/service-cert-form.pdf",
            "file_type": "PDF",
            "file_size": "145 KB",
        },
        {
            "title": "Leadership Training Module",
            "description": "Video training on leadership skills",
            "category": "Videos",
            "file_url": "/videos/leadership-training.mp4",
            "file_type": "MP4",
            "file_size": "45.2 MB",
        },
    ],
}
